"""Site-source layout and output path helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE_ROOT = Path("src/web")
DEFAULT_TEMPLATE_EXT = ".tmpl"
DEFAULT_OUTPUT_EXT = ".html"

CONFIG_FILE_NAME = "config.json"
DOWNLOADS_TEMPLATE_NAME = "downloads-archive-version"
DOCUMENTATION_TEMPLATE_NAME = "documentation-archive-version"


def _env_path(env_var: str, fallback: Path) -> Path:
    raw = os.environ.get(env_var)
    if raw:
        return Path(raw).expanduser()
    return fallback


def default_source_root() -> Path:
    return _env_path("WEBBUILDER_SOURCE", DEFAULT_SOURCE_ROOT)


def default_output_root() -> Path:
    return _env_path("WEBBUILDER_OUTPUT", Path.cwd())


@dataclass(frozen=True)
class SiteLayout:
    """Fixed directory layout below a site-source root."""

    root: Path

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def versions_dir(self) -> Path:
        return self.root / "versions"

    @property
    def news_dir(self) -> Path:
        return self.root / "news"

    @property
    def pages_dir(self) -> Path:
        return self.root / "pages"

    @property
    def templates_dir(self) -> Path:
        return self.root / "templates"

    @property
    def resources_dir(self) -> Path:
        return self.root / "resources"


def is_plain_file_component(value: str) -> bool:
    """True if ``value`` can only name an entry directly inside a directory."""
    if value.strip() in {"", ".", ".."}:
        return False
    return not any(sep in value for sep in ("/", os.sep, os.altsep) if sep)
