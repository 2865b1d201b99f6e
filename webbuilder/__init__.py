"""Webbuilder - static site builder for project websites.

Reads a site-source directory (config, version and news descriptors,
Jinja2 page templates, static resources) and writes the finished HTML
site.

Example:
    from webbuilder import BuildOptions, SiteBuilder

    result = SiteBuilder(BuildOptions(source_root="src/web", output_root="public")).build()
    print(f"Wrote {result.file_count} pages")
"""

from webbuilder.builder import SiteBuilder, build_site
from webbuilder.config import BuildOptions, load_config
from webbuilder.errors import (
    BuildIOError,
    ConfigError,
    DataError,
    EmptyCatalogError,
    RenderError,
    WebBuilderError,
)
from webbuilder.models import BuildResult, News, SiteConfig, Version

__version__ = "0.1.0"

__all__ = [
    "BuildIOError",
    "BuildOptions",
    "BuildResult",
    "ConfigError",
    "DataError",
    "EmptyCatalogError",
    "News",
    "RenderError",
    "SiteBuilder",
    "SiteConfig",
    "Version",
    "WebBuilderError",
    "build_site",
    "load_config",
]
