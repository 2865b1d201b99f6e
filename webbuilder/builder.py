"""Build orchestration: descriptors in, HTML pages and resources out."""

from __future__ import annotations

import os
import shutil
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from webbuilder.catalog.news import NewsCatalog
from webbuilder.catalog.versions import ORDERINGS, VersionCatalog, VersionOrder
from webbuilder.config import BuildOptions, load_config
from webbuilder.errors import BuildIOError, ConfigError, WebBuilderError
from webbuilder.lib.files import copy_tree, has_extension, list_files
from webbuilder.lib.log import get_logger, log_context
from webbuilder.models import BuildResult, News, SiteConfig, Version
from webbuilder.paths import SiteLayout
from webbuilder.rendering.context import RenderContext
from webbuilder.rendering.renderer import VERSIONED_TEMPLATES, PageRenderer, TemplateEngine

logger = get_logger(__name__)

STAGING_PREFIX = ".webbuilder-staging-"


class SiteBuilder:
    """Build the site described by a site-source directory.

    Steps run strictly in order and the first failure aborts the build:

    1. load config.json
    2. load versions/ (ordered, latest first)
    3. load news/ (newest first, capped by maxNews)
    4. copy resources/
    5. render pages/*
    6. render the archive templates once per version

    Everything is read before anything is written, so a broken descriptor
    leaves the output directory untouched. Without ``atomic`` a failure
    during rendering leaves already written files in place.
    """

    def __init__(self, options: BuildOptions | None = None, *, order: VersionOrder | None = None) -> None:
        self.options = options or BuildOptions()
        self.layout = SiteLayout(self.options.source_root)
        if order is None:
            try:
                order = ORDERINGS[self.options.order]
            except KeyError:
                choices = ", ".join(sorted(ORDERINGS))
                raise ConfigError(f"Unknown version order {self.options.order!r} (choose from {choices})") from None
        self.version_catalog = VersionCatalog(order)
        self.news_catalog = NewsCatalog()
        self.engine = TemplateEngine(self.layout.root, self.options.template_ext)

    @contextmanager
    def _step(self, name: str) -> Iterator[None]:
        with log_context(step=name):
            logger.info("step started")
            try:
                yield
            except WebBuilderError as exc:
                logger.error("build step failed", error=str(exc))
                raise
            logger.info("step finished")

    def build(self) -> BuildResult:
        started = time.monotonic()
        options = self.options
        layout = self.layout

        with self._step("load config"):
            config = load_config(layout.config_file)
        with self._step("load versions"):
            versions = self.version_catalog.load(layout.versions_dir)
        with self._step("load news"):
            news = self.news_catalog.load(layout.news_dir, config.max_news)
        with self._step("list pages"):
            page_templates = list_files(layout.pages_dir, has_extension(options.template_ext))

        output_root = options.output_root.resolve()
        logger.info("target directory", path=str(output_root))
        try:
            output_root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BuildIOError(f"Cannot create output directory {output_root}: {exc}", path=output_root) from exc

        if not options.atomic:
            pages, versioned = self._write_site(output_root, config, versions, news, page_templates)
        else:
            try:
                staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=output_root))
            except OSError as exc:
                raise BuildIOError(f"Cannot create staging directory in {output_root}: {exc}", path=output_root) from exc
            try:
                pages, versioned = self._write_site(staging, config, versions, news, page_templates)
                with self._step("publish"):
                    _publish(staging, output_root)
            finally:
                shutil.rmtree(staging, ignore_errors=True)

        result = BuildResult(
            output_root=str(output_root),
            pages=[path.name for path in pages],
            versioned_pages=[path.name for path in versioned],
            version_count=len(versions),
            news_count=len(news),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        logger.info(
            "build finished",
            pages=len(result.pages),
            versioned_pages=len(result.versioned_pages),
            duration_ms=result.duration_ms,
        )
        return result

    def _write_site(
        self,
        target: Path,
        config: SiteConfig,
        versions: list[Version],
        news: list[News],
        page_templates: list[Path],
    ) -> tuple[list[Path], list[Path]]:
        with self._step("copy resources"):
            copy_tree(self.layout.resources_dir, target / "resources")

        context = RenderContext.build(config, versions, versions[0], news)
        renderer = PageRenderer(
            self.engine,
            target,
            template_ext=self.options.template_ext,
            output_ext=self.options.output_ext,
        )
        logger.info("creating pages", pages=len(page_templates), versions=len(versions))
        with self._step("render pages"):
            pages = renderer.render_generic_pages(context, page_templates)
        with self._step("render versioned pages"):
            versioned = renderer.render_versioned_pages(context, versions, VERSIONED_TEMPLATES)
        return pages, versioned


def _publish(staging: Path, output_root: Path) -> None:
    """Move every staged entry into ``output_root``."""
    try:
        for entry in sorted(staging.iterdir()):
            target = output_root / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, dirs_exist_ok=True)
            else:
                os.replace(entry, target)
    except OSError as exc:
        raise BuildIOError(f"Cannot publish staged build into {output_root}: {exc}", path=output_root) from exc


def build_site(options: BuildOptions | None = None) -> BuildResult:
    return SiteBuilder(options).build()


__all__ = ["SiteBuilder", "build_site"]
