"""Filesystem helpers used by the catalogs and the renderer.

Directory enumeration always sorts by name so builds are reproducible.
Every OSError is re-raised as BuildIOError with the offending path.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from webbuilder.errors import BuildIOError

PathPredicate = Callable[[Path], bool]


def has_extension(extension: str) -> PathPredicate:
    """Build a predicate matching regular files with the given extension."""
    suffix = extension if extension.startswith(".") else f".{extension}"

    def _matches(path: Path) -> bool:
        return path.is_file() and path.name.endswith(suffix) and path.name != suffix

    _matches.__name__ = f"has_extension_{suffix.lstrip('.')}"
    return _matches


is_json_file = has_extension(".json")


def list_files(directory: Path, predicate: PathPredicate) -> list[Path]:
    """Return files in ``directory`` accepted by ``predicate``, sorted by name."""
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise BuildIOError(f"Cannot list directory {directory}: {exc}", path=directory) from exc
    return sorted((entry for entry in entries if predicate(entry)), key=lambda p: p.name)


def write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise BuildIOError(f"Cannot write {path}: {exc}", path=path) from exc


def copy_tree(source: Path, destination: Path) -> None:
    """Mirror ``source`` into ``destination``, overwriting existing files."""
    if not source.is_dir():
        raise BuildIOError(f"Resource directory not found: {source}", path=source)
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except OSError as exc:
        raise BuildIOError(f"Cannot copy {source} to {destination}: {exc}", path=destination) from exc


__all__ = ["PathPredicate", "copy_tree", "has_extension", "is_json_file", "list_files", "write_text"]
