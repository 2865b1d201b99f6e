"""Dates encoded in descriptor filenames.

News descriptors carry their publish date in the filename
(``news/2023-05-01.json``). These helpers are plain functions with no
retained parser or formatter state.
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path

from webbuilder.errors import DataError

_FILENAME_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Fixed English abbreviations; display dates do not follow the process locale.
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _stem(filename: str | Path) -> str:
    return Path(filename).stem


def is_dated_filename(filename: str | Path) -> bool:
    """Return True if the filename stem is a valid ``yyyy-MM-dd`` date."""
    stem = _stem(filename)
    if not _FILENAME_DATE_RE.match(stem):
        return False
    try:
        date.fromisoformat(stem)
    except ValueError:
        return False
    return True


def parse_filename_date(filename: str | Path) -> date:
    """Parse the ``yyyy-MM-dd`` date encoded in a filename.

    Raises:
        DataError: If the stem does not match the pattern or is not a real
            calendar date (e.g. ``2023-02-30``).
    """
    stem = _stem(filename)
    if not _FILENAME_DATE_RE.match(stem):
        raise DataError(
            f"Filename {Path(filename).name!r} does not encode a yyyy-MM-dd date",
            path=Path(filename),
        )
    try:
        return date.fromisoformat(stem)
    except ValueError as exc:
        raise DataError(
            f"Filename {Path(filename).name!r} is not a valid calendar date: {exc}",
            path=Path(filename),
        ) from exc


def format_display_date(value: date) -> str:
    """Format a date as day-of-month plus month abbreviation, e.g. ``01 May``."""
    return f"{value.day:02d} {_MONTH_ABBR[value.month - 1]}"


__all__ = ["format_display_date", "is_dated_filename", "parse_filename_date"]
