"""pede_store - Typed key-value records in two persisted namespaces.

This package stores values under (key, type) in a player-prefs namespace and a
file namespace, and validates the persisted records after external edits.
It is organized with clear architectural boundaries:

- **type_codec**: Typed value <-> string conversion (primitive, pointer, structured)
- **models/**: Records, namespaces, lookup results and fixed-width marker types
- **persistence/**: RecordStore, PedeData, persistence sinks and JSON5/JSON I/O
- **validation/**: Key/type/value rules and error reporters
- **commands/**: CLI command handlers for inspecting data documents
- **errors**: Typed error hierarchy with explicit failure states
"""

__version__ = "1.0.0"
