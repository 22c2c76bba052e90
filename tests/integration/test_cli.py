import json

import pytest

from pede_store.cli import main
from pede_store.persistence import write_content_file


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "pede.data.json"


def _run(data_file, *argv):
    return main(["--data-file", str(data_file), *argv])


def _document(data_file):
    return json.loads(data_file.read_text(encoding="utf-8"))


def test_set_then_show(data_file, capsys):
    assert _run(data_file, "prefs", "set", "volume", "0.8", "--type", "float") == 0
    assert _run(data_file, "prefs", "show", "volume", "--type", "float") == 0

    out = capsys.readouterr().out
    assert "Set float record 'volume'." in out
    assert out.splitlines()[-1] == "0.8"
    assert _document(data_file)["playerPrefData"] == [
        {"key": "volume", "type": "float", "value": "0.8"}
    ]


def test_show_missing_record(data_file, capsys):
    assert _run(data_file, "files", "show", "slot", "--type", "int") == 1
    assert "No int record 'slot'." in capsys.readouterr().out


def test_show_structured_record(data_file, capsys):
    write_content_file(
        data_file,
        {
            "schemaVersion": 1,
            "fileData": [{"key": "slot", "type": "game.SaveSlot", "value": '{"level": 3}'}],
        },
    )

    assert _run(data_file, "files", "show", "slot", "--type", "game.SaveSlot") == 0
    assert json.loads(capsys.readouterr().out) == {"level": 3}


def test_set_rejects_unparseable_value(data_file, capsys):
    assert _run(data_file, "prefs", "set", "level", "abc", "--type", "int") == 1

    assert capsys.readouterr().err.startswith("Error: Cannot decode")
    assert not data_file.exists()


def test_set_rejects_structured_type_tag(data_file):
    with pytest.raises(SystemExit):
        _run(data_file, "prefs", "set", "slot", "{}", "--type", "game.SaveSlot")


def test_list_records(data_file, capsys):
    _run(data_file, "prefs", "set", "muted", "true", "--type", "bool")
    capsys.readouterr()

    assert _run(data_file, "prefs", "list") == 0
    line = capsys.readouterr().out.strip()
    assert line.startswith("0 | muted")
    assert line.endswith("| True")

    assert _run(data_file, "files", "list") == 0
    assert "No records found." in capsys.readouterr().out


def test_validate_ok(data_file, capsys):
    _run(data_file, "prefs", "set", "level", "4", "--type", "int")

    assert _run(data_file, "validate") == 0
    assert "OK: 1 prefs, 0 files" in capsys.readouterr().out


def test_validate_reports_corrupted_document(data_file, capsys):
    write_content_file(
        data_file,
        {
            "schemaVersion": 1,
            "playerPrefData": [
                {"key": "a", "type": "int", "value": "1"},
                {"key": "a", "type": "str", "value": "x"},
            ],
            "fileData": [{"key": "b", "type": "int", "value": "oops"}],
        },
    )

    assert _run(data_file, "validate") == 1

    out = capsys.readouterr().out
    assert "Validation failed:" in out
    assert "$playerPrefData[1]: duplicate key ('x')" in out
    assert "$fileData[0]: value does not decode under its type ('b')" in out


def test_delete_record(data_file, capsys):
    _run(data_file, "files", "set", "slot", "2", "--type", "uint8")

    assert _run(data_file, "files", "delete", "slot", "--type", "uint8") == 0
    assert _run(data_file, "files", "delete", "slot", "--type", "uint8") == 1

    out = capsys.readouterr().out
    assert "Deleted uint8 record 'slot'." in out
    assert "No uint8 record 'slot'." in out
    assert _document(data_file)["fileData"] == []


def test_namespace_delete_all_keeps_other_namespace(data_file, capsys):
    _run(data_file, "prefs", "set", "a", "1", "--type", "int")
    _run(data_file, "files", "set", "b", "2", "--type", "int")

    assert _run(data_file, "prefs", "delete-all") == 0

    document = _document(data_file)
    assert document["playerPrefData"] == []
    assert len(document["fileData"]) == 1
    assert "Deleted all playerPrefData records." in capsys.readouterr().out


def test_delete_all_clears_both_namespaces(data_file, capsys):
    _run(data_file, "prefs", "set", "a", "1", "--type", "int")
    _run(data_file, "files", "set", "b", "2", "--type", "int")

    assert _run(data_file, "delete-all") == 0

    document = _document(data_file)
    assert document["playerPrefData"] == []
    assert document["fileData"] == []
    assert "Deleted all records." in capsys.readouterr().out


def test_data_dir_resolves_json5_document(tmp_path, capsys):
    (tmp_path / "pede.data.json5").write_text(
        "{schemaVersion: 1, playerPrefData: [{key: 'name', type: 'str', value: 'ana'}]}",
        encoding="utf-8",
    )

    assert main(["--data-dir", str(tmp_path), "prefs", "show", "name", "--type", "str"]) == 0
    assert capsys.readouterr().out.strip() == "ana"


def test_invalid_document_is_reported(data_file, capsys):
    data_file.write_text("{broken", encoding="utf-8")

    assert _run(data_file, "validate") == 1
    assert "Error: Invalid JSON" in capsys.readouterr().err
