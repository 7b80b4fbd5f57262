import importlib.util
import json
import sys

import pytest

from music_tree_etl.settings import PROJECT_ROOT


def _load_script(relative_path: str):
    path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


print_library_tree = _load_script("scripts/print_library_tree.py")
validate_node_ids_script = _load_script("scripts_validation/validate_node_ids.py")

DUPLICATED_CSV = (
    "Artist,TrackName,Year,Genre\n"
    "Queen,Kashmir,1975,Rock\n"
    "Queen,Kashmir,1975,Rock\n"
)


# --- Tests for print_library_tree ---


def test_print_library_tree_sample_outline(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["print_library_tree", "--collapse", "Queen"])

    print_library_tree.main()

    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["- Music Library", "  - The Beatles"]
    assert "  + Queen" in lines
    assert "    - Bohemian Rhapsody" not in lines


def test_print_library_tree_json_disambiguated(tmp_path, monkeypatch, capsys):
    csv_file = tmp_path / "library.csv"
    csv_file.write_text(DUPLICATED_CSV, encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        ["print_library_tree", str(csv_file), "--json", "--disambiguate-ids"],
    )

    print_library_tree.main()

    tree = json.loads(capsys.readouterr().out)
    assert [t["id"] for t in tree["children"][0]["children"]] == [
        "Queen-Kashmir#0",
        "Queen-Kashmir#1",
    ]


def test_print_library_tree_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["print_library_tree", str(tmp_path / "missing.csv")])

    with pytest.raises(SystemExit) as exc_info:
        print_library_tree.main()

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().out


# --- Tests for validate_node_ids ---


def test_validate_node_ids_reports_collisions(tmp_path, capsys):
    csv_file = tmp_path / "library.csv"
    csv_file.write_text(DUPLICATED_CSV, encoding="utf-8")

    assert validate_node_ids_script.validate_node_ids(csv_file) is False

    out = capsys.readouterr().out
    assert "Found 6 node(s) sharing 3 id(s)" in out
    assert "'Queen-Kashmir'" in out


def test_validate_node_ids_unique(tmp_path, capsys):
    csv_file = tmp_path / "library.csv"
    csv_file.write_text("Artist,TrackName,Year,Genre\nABBA,Waterloo,1974,Pop\n", encoding="utf-8")

    assert validate_node_ids_script.validate_node_ids(csv_file) is True
    assert "Every node id is unique" in capsys.readouterr().out


def test_validate_node_ids_missing_file(tmp_path, capsys):
    assert validate_node_ids_script.validate_node_ids(tmp_path / "missing.csv") is False
    assert "File not found" in capsys.readouterr().out
