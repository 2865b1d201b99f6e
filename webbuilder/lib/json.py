"""JSON decoding for descriptor files, backed by orjson."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

# orjson.JSONDecodeError subclasses ValueError
JSONDecodeError = orjson.JSONDecodeError


def loads(obj: str | bytes) -> Any:
    """Load object from JSON string or bytes."""
    return orjson.loads(obj)


def load_file(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises OSError for unreadable files and JSONDecodeError for invalid JSON.
    """
    return orjson.loads(path.read_bytes())
