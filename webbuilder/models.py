"""Typed descriptors parsed from the site-source JSON files.

Descriptor keys are camelCase in JSON and snake_case in Python. Templates
may use either spelling for declared fields (``version.versionShort`` and
``version.version_short`` are the same value). Unknown keys are kept and
reachable as attributes under their JSON name.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from webbuilder.paths import is_plain_file_component


class SiteConfig(BaseModel):
    """Site-wide settings from ``config.json``."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    max_news: int = Field(alias="maxNews", ge=0)
    """Cap on news items surfaced to templates."""

    @property
    def maxNews(self) -> int:  # noqa: N802
        return self.max_news


class Version(BaseModel):
    """A released version of the project."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    version_full: str = Field(alias="versionFull", min_length=1)
    """Full version string, e.g. ``18.0.1``."""

    version_short: str = Field(alias="versionShort", min_length=1)
    """Short identifier used in output file names, e.g. ``18.0``."""

    release_date: date | None = Field(default=None, alias="releaseDate")
    """Release date, only needed when ordering by date."""

    is_latest: bool = Field(default=False, alias="isLatest")
    """Set by the version catalog; authored values are overwritten."""

    @field_validator("version_short")
    @classmethod
    def _short_is_file_name_part(cls, value: str) -> str:
        # ends up verbatim in downloads-<versionShort>.html
        if not is_plain_file_component(value):
            raise ValueError(f"versionShort {value!r} cannot be used in an output file name")
        return value

    @property
    def versionFull(self) -> str:  # noqa: N802
        return self.version_full

    @property
    def versionShort(self) -> str:  # noqa: N802
        return self.version_short

    @property
    def releaseDate(self) -> date | None:  # noqa: N802
        return self.release_date

    @property
    def isLatest(self) -> bool:  # noqa: N802
        return self.is_latest


class News(BaseModel):
    """A news item; its date comes from the descriptor filename."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    title: str
    body: str

    published: date | None = None
    """Calendar date parsed from the filename."""

    display_date: str = Field(default="", alias="displayDate")
    """Short rendering of ``published``, e.g. ``01 May``."""

    @property
    def displayDate(self) -> str:  # noqa: N802
        return self.display_date


class BuildResult(BaseModel):
    output_root: str
    pages: list[str]
    versioned_pages: list[str]
    version_count: int
    news_count: int
    duration_ms: int

    @property
    def file_count(self) -> int:
        return len(self.pages) + len(self.versioned_pages)


__all__ = ["BuildResult", "News", "SiteConfig", "Version"]
