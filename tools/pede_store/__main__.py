#!/usr/bin/env python3
"""Entry point for running as `python -m pede_store`."""

from pede_store.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
