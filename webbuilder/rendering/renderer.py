"""Page rendering through Jinja2.

Generic pages (``pages/*.tmpl``) render once against the base context.
The two archive templates render once per version, each time against a
context whose ``version`` entry is that version.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from webbuilder.errors import DataError, RenderError
from webbuilder.lib.files import write_text
from webbuilder.lib.log import get_logger
from webbuilder.models import Version
from webbuilder.paths import (
    DEFAULT_OUTPUT_EXT,
    DEFAULT_TEMPLATE_EXT,
    DOCUMENTATION_TEMPLATE_NAME,
    DOWNLOADS_TEMPLATE_NAME,
    is_plain_file_component,
)
from webbuilder.rendering.context import RenderContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class VersionedTemplate:
    """A template rendered once per version into ``<prefix><versionShort>.html``."""

    name: str
    prefix: str

    def template_ref(self, template_ext: str = DEFAULT_TEMPLATE_EXT) -> str:
        return f"templates/{self.name}{template_ext}"


DOWNLOADS_ARCHIVE = VersionedTemplate(DOWNLOADS_TEMPLATE_NAME, "downloads-")
DOCUMENTATION_ARCHIVE = VersionedTemplate(DOCUMENTATION_TEMPLATE_NAME, "documentation-")
VERSIONED_TEMPLATES = (DOWNLOADS_ARCHIVE, DOCUMENTATION_ARCHIVE)


class TemplateEngine:
    """Jinja2 environment rooted at the site-source directory.

    Template identifiers are posix paths relative to that root, e.g.
    ``pages/index.tmpl``. Undefined names fail the render instead of
    rendering as empty strings.
    """

    def __init__(self, source_root: Path, template_ext: str = DEFAULT_TEMPLATE_EXT) -> None:
        self.source_root = Path(source_root)
        self.env = Environment(
            loader=FileSystemLoader(str(self.source_root), encoding="utf-8"),
            autoescape=select_autoescape(["html", "xml", template_ext.lstrip(".")]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, context: RenderContext, template_ref: str) -> str:
        try:
            template = self.env.get_template(template_ref)
        except TemplateNotFound as exc:
            raise RenderError(f"Template not found: {template_ref}", template=template_ref) from exc
        except Exception as exc:
            # syntax errors, undecodable bytes, unreadable files
            raise RenderError(f"Cannot load template {template_ref}: {exc}", template=template_ref) from exc
        try:
            return template.render(context)
        except TemplateError as exc:
            raise RenderError(f"Failed to render {template_ref}: {exc}", template=template_ref) from exc
        except Exception as exc:
            # errors raised by expressions inside the template, e.g. 1 // 0
            raise RenderError(
                f"Failed to render {template_ref}: {type(exc).__name__}: {exc}",
                template=template_ref,
            ) from exc


def page_output_name(
    template: Path,
    template_ext: str = DEFAULT_TEMPLATE_EXT,
    output_ext: str = DEFAULT_OUTPUT_EXT,
) -> str:
    """``about.tmpl`` -> ``about.html``, ``about.html.j2`` -> ``about.html``."""
    name = template.name
    if template_ext and name.endswith(template_ext) and name != template_ext:
        return f"{name[: -len(template_ext)]}{output_ext}"
    return f"{template.stem}{output_ext}"


def versioned_output_name(
    versioned: VersionedTemplate, version: Version, output_ext: str = DEFAULT_OUTPUT_EXT
) -> str:
    """``downloads-`` + ``18.0`` -> ``downloads-18.0.html``."""
    if not is_plain_file_component(version.version_short):
        raise DataError(
            f"Version {version.version_full!r} has versionShort {version.version_short!r}, "
            "which cannot be used in an output file name"
        )
    return f"{versioned.prefix}{version.version_short}{output_ext}"


class PageRenderer:
    """Renders templates and writes the results below ``output_root``."""

    def __init__(
        self,
        engine: TemplateEngine,
        output_root: Path,
        *,
        template_ext: str = DEFAULT_TEMPLATE_EXT,
        output_ext: str = DEFAULT_OUTPUT_EXT,
    ) -> None:
        self.engine = engine
        self.output_root = Path(output_root)
        self.template_ext = template_ext
        self.output_ext = output_ext

    def render_page(self, context: RenderContext, template_ref: str) -> str:
        return self.engine.render(context, template_ref)

    def _write(self, context: RenderContext, template_ref: str, output_name: str) -> Path:
        html = self.render_page(context, template_ref)
        target = self.output_root / output_name
        write_text(target, html)
        logger.info("created", output=output_name, template=template_ref)
        return target

    def render_generic_pages(
        self, context: RenderContext, page_templates: Sequence[Path]
    ) -> list[Path]:
        """Render each page template once, in name order.

        ``page_templates`` are paths inside the engine's source root.
        """
        written = []
        for template in sorted(page_templates, key=lambda p: p.name):
            template_ref = template.relative_to(self.engine.source_root).as_posix()
            written.append(
                self._write(context, template_ref, page_output_name(template, self.template_ext, self.output_ext))
            )
        return written

    def render_versioned_pages(
        self,
        context: RenderContext,
        versions: Sequence[Version],
        versioned_templates: Sequence[VersionedTemplate] = VERSIONED_TEMPLATES,
    ) -> list[Path]:
        """Render every versioned template for every version, in catalog order."""
        written = []
        for version in versions:
            version_context = context.with_version(version)
            for versioned in versioned_templates:
                written.append(
                    self._write(
                        version_context,
                        versioned.template_ref(self.template_ext),
                        versioned_output_name(versioned, version, self.output_ext),
                    )
                )
        return written


__all__ = [
    "DOCUMENTATION_ARCHIVE",
    "DOWNLOADS_ARCHIVE",
    "PageRenderer",
    "TemplateEngine",
    "VERSIONED_TEMPLATES",
    "VersionedTemplate",
    "page_output_name",
    "versioned_output_name",
]
