"""News catalog: newest items first, capped by ``config.maxNews``.

News files are named ``yyyy-MM-dd.json``. Because that format is fixed
width, sorting filenames in descending string order is the same as sorting
by publish date, newest first.
"""

from __future__ import annotations

from pathlib import Path

from webbuilder.catalog.descriptors import read_descriptor
from webbuilder.errors import DataError
from webbuilder.lib.dates import format_display_date, is_dated_filename, parse_filename_date
from webbuilder.lib.files import is_json_file, list_files
from webbuilder.lib.log import get_logger
from webbuilder.models import News

logger = get_logger(__name__)


def select_recent(files: list[Path], max_items: int) -> list[Path]:
    """Newest ``max_items`` files by filename, newest first."""
    if max_items <= 0:
        return []
    return sorted(files, key=lambda p: p.name, reverse=True)[:max_items]


class NewsCatalog:
    def load(self, directory: Path, max_items: int) -> list[News]:
        """Load the most recent news items.

        Every filename is checked against the date pattern, including files
        that fall outside the ``max_items`` window.

        Raises:
            DataError: A filename is not a valid date or a body fails to parse.
            BuildIOError: ``directory`` cannot be listed.
        """
        files = list_files(directory, is_json_file)
        malformed = [path.name for path in files if not is_dated_filename(path)]
        if malformed:
            raise DataError(
                f"News filenames must be yyyy-MM-dd.json: {', '.join(malformed)}",
                path=directory / malformed[0],
            )

        items: list[News] = []
        for path in select_recent(files, max_items):
            published = parse_filename_date(path)
            news = read_descriptor(path, News)
            items.append(
                news.model_copy(
                    update={
                        "published": published,
                        "display_date": format_display_date(published),
                    }
                )
            )
        logger.debug("news loaded", available=len(files), selected=len(items))
        return items


def load_news(directory: Path, max_items: int) -> list[News]:
    return NewsCatalog().load(directory, max_items)


__all__ = ["NewsCatalog", "load_news", "select_recent"]
