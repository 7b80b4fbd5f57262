import json
from pathlib import Path

import pytest

from music_tree_etl.utils.io_helpers import (
    load_json,
    load_jsonl,
    save_json,
    save_text,
    save_to_jsonl,
)


def test_save_to_jsonl(tmp_path: Path):
    """
    Tests that save_to_jsonl correctly writes a list of dicts to a JSONL file.
    """
    # 1. Setup
    output_file = tmp_path / "test_data" / "output.jsonl"
    sample_data = [
        {"artist": "Queen", "track_name": "Kashmir", "year": "1975", "genre": "Rock"},
        {"artist": "Sigur Rós", "track_name": "Hoppípolla", "year": "2005", "genre": ""},
    ]

    # 2. Action
    save_to_jsonl(sample_data, output_file)

    # 3. Assertions
    lines = output_file.read_text(encoding="utf-8").strip().split("\n")
    assert len(lines) == len(sample_data)
    assert [json.loads(line) for line in lines] == sample_data
    # Unicode is written as-is
    assert "Sigur Rós" in lines[1]


def test_save_to_jsonl_empty_list(tmp_path: Path):
    output_file = tmp_path / "empty.jsonl"

    save_to_jsonl([], output_file)

    assert output_file.exists()
    assert output_file.read_text(encoding="utf-8") == ""


def test_load_jsonl_skips_blank_lines(tmp_path: Path):
    input_file = tmp_path / "input.jsonl"
    input_file.write_text('{"id": 1}\n\n{"id": 2}\n', encoding="utf-8")

    assert load_jsonl(input_file) == [{"id": 1}, {"id": 2}]


def test_load_jsonl_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_jsonl(tmp_path / "missing.jsonl")


def test_save_and_load_json(tmp_path: Path):
    output_file = tmp_path / "new_dir" / "tree.json"
    data = {"id": "root", "label": "Music Library", "children": []}

    save_json(data, output_file)

    assert load_json(output_file) == data


def test_save_text_keeps_line_endings(tmp_path: Path):
    output_file = tmp_path / "exports" / "library.csv"
    text = "Artist,TrackName,Year,Genre\r\nQueen,Kashmir,1975,Rock\r\n"

    save_text(text, output_file)

    assert output_file.read_bytes() == text.encode("utf-8")
