"""Version and news catalogs loaded from descriptor directories."""

from webbuilder.catalog.news import NewsCatalog, load_news
from webbuilder.catalog.versions import (
    ORDERINGS,
    VersionCatalog,
    VersionOrder,
    load_versions,
    release_date_key,
    semantic_version_key,
)

__all__ = [
    "NewsCatalog",
    "ORDERINGS",
    "VersionCatalog",
    "VersionOrder",
    "load_news",
    "load_versions",
    "release_date_key",
    "semantic_version_key",
]
