"""
JSON IO helpers built on orjson.
- read_json(Path)  → Any | None (None if the file is missing)
- write_json(Path, data) → atomic write (temp file in the same folder + os.replace)

Note:
- orjson returns/expects bytes; files are read/written in binary mode.
- write_json indents with 2 spaces so the mock database stays hand-editable.
- A failed write leaves the previous file untouched and removes the temp file.
"""
import os
import tempfile
from pathlib import Path
from typing import Any

import orjson as json


def read_json(path: Path) -> Any:
    """Reads a JSON file (or None if it does not exist)."""
    if not path.exists():
        return None
    with path.open("rb") as f:
        return json.loads(f.read())


def write_json(path: Path, data: Any) -> None:
    """Writes a JSON file atomically (parent folder created if missing)."""
    payload = json.dumps(data, option=json.OPT_INDENT_2)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
