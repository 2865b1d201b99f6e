"""Version catalog: load, order and designate the latest version.

Ordering is a pluggable key function. The catalog sorts descending by that
key with a stable sort, so the most relevant version lands at index 0 and
versions with equal keys keep their file-name order.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from webbuilder.catalog.descriptors import read_descriptor
from webbuilder.errors import DataError, EmptyCatalogError
from webbuilder.lib.files import is_json_file, list_files
from webbuilder.lib.log import get_logger
from webbuilder.models import Version

logger = get_logger(__name__)

VersionOrder = Callable[[Version], Any]

_VERSION_RE = re.compile(r"^v?(\d+(?:\.\d+)*)(?:[.+-]?(.+))?$")
_QUALIFIER_CHUNK_RE = re.compile(r"\d+|[^\d]+")
_FINAL_QUALIFIERS = {"final", "ga", "release"}


def _qualifier_key(qualifier: str) -> tuple[tuple[int, Any], ...]:
    chunks = []
    for chunk in _QUALIFIER_CHUNK_RE.findall(qualifier.lower()):
        if chunk.isdigit():
            chunks.append((1, int(chunk)))
        else:
            chunks.append((0, chunk.strip(".-_")))
    return tuple(chunks)


def semantic_version_key(version: Version) -> tuple[Any, ...]:
    """Order by version number, final releases above pre-releases.

    ``18.0.0`` > ``18.0.0-rc2`` > ``18.0.0-rc1`` > ``17.0.1``. A qualifier of
    ``Final``/``GA`` counts as a final release.
    """
    match = _VERSION_RE.match(version.version_full.strip())
    if not match:
        raise DataError(f"Cannot order version {version.version_full!r}: not a numeric version")
    numbers = tuple(int(part) for part in match.group(1).split("."))
    numbers += (0,) * (4 - len(numbers))
    qualifier = match.group(2)
    if qualifier is None or qualifier.lower() in _FINAL_QUALIFIERS:
        return (numbers, 1, ())
    return (numbers, 0, _qualifier_key(qualifier))


def release_date_key(version: Version) -> Any:
    """Order by ``releaseDate``, newest first."""
    if version.release_date is None:
        raise DataError(f"Cannot order version {version.version_full!r}: releaseDate is missing")
    return version.release_date


ORDERINGS: dict[str, VersionOrder] = {
    "semver": semantic_version_key,
    "date": release_date_key,
}


class VersionCatalog:
    """Loads every ``*.json`` version descriptor in a directory."""

    def __init__(self, order: VersionOrder = semantic_version_key) -> None:
        self.order = order

    def load(self, directory: Path) -> list[Version]:
        """Load, order and mark the latest version.

        Raises:
            EmptyCatalogError: No descriptor files in ``directory``.
            DataError: A descriptor fails to parse or cannot be ordered.
            BuildIOError: ``directory`` cannot be listed.
        """
        files = list_files(directory, is_json_file)
        if not files:
            raise EmptyCatalogError(directory)

        loaded = [read_descriptor(path, Version) for path in files]
        ordered = sorted(loaded, key=self.order, reverse=True)
        versions = [
            version.model_copy(update={"is_latest": index == 0})
            for index, version in enumerate(ordered)
        ]
        logger.debug(
            "versions loaded",
            count=len(versions),
            latest=versions[0].version_full,
        )
        return versions


def load_versions(directory: Path, order: VersionOrder = semantic_version_key) -> list[Version]:
    return VersionCatalog(order).load(directory)


__all__ = [
    "ORDERINGS",
    "VersionCatalog",
    "VersionOrder",
    "load_versions",
    "release_date_key",
    "semantic_version_key",
]
