import json
from pathlib import Path
from typing import List, Dict, Any


def load_jsonl(file_path: Path) -> List[Dict[str, Any]]:
    """
    Reads a JSONL file and returns a list of dictionaries.

    Args:
        file_path: The Path object for the file to read.

    Returns:
        A list of dictionaries containing the data.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    data = []
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                data.append(json.loads(line))
    return data


def save_to_jsonl(data: List[Dict], file_path: Path, mode: str = "w"):
    """
    Saves a list of dictionaries to a file in JSONL format.

    Args:
        data: The list of dictionary records to save.
        file_path: The Path object for the output file.
        mode: The file open mode ('w' for write/overwrite, 'a' for append).
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, mode, encoding="utf-8") as f:
        for record in data:
            json_string = json.dumps(record, ensure_ascii=False)
            f.write(json_string + "\n")


def save_json(data: Dict[str, Any], file_path: Path):
    """
    Saves a single JSON document, creating parent directories as needed.

    Args:
        data: The JSON-serialisable object to save.
        file_path: The Path object for the output file.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_json(file_path: Path) -> Dict[str, Any]:
    """
    Reads a single JSON document.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_text(text: str, file_path: Path):
    """
    Writes text unchanged. Newlines are not translated, so the bytes on
    disk match the input exactly.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
