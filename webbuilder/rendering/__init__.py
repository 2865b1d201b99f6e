"""Render context and page rendering on top of Jinja2."""

from webbuilder.rendering.context import RenderContext, with_version
from webbuilder.rendering.renderer import (
    DOCUMENTATION_ARCHIVE,
    DOWNLOADS_ARCHIVE,
    PageRenderer,
    TemplateEngine,
    VersionedTemplate,
)

__all__ = [
    "DOCUMENTATION_ARCHIVE",
    "DOWNLOADS_ARCHIVE",
    "PageRenderer",
    "RenderContext",
    "TemplateEngine",
    "VersionedTemplate",
    "with_version",
]
