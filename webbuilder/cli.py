"""Command-line interface."""

from __future__ import annotations

from pathlib import Path

import click

from webbuilder import __version__
from webbuilder.catalog.versions import ORDERINGS
from webbuilder.paths import DEFAULT_TEMPLATE_EXT, default_output_root, default_source_root


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.version_option(version=__version__, prog_name="webbuilder")
def cli(verbose: bool, json_logs: bool) -> None:
    """Build a static project website from descriptors and templates."""
    from webbuilder.lib.log import configure_logging

    configure_logging(verbose=verbose, json_logs=json_logs)


@cli.command("build")
@click.option(
    "--source", "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Site-source directory (default: $WEBBUILDER_SOURCE or src/web)",
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory (default: $WEBBUILDER_OUTPUT or the current directory)",
)
@click.option(
    "--template-ext",
    default=DEFAULT_TEMPLATE_EXT,
    show_default=True,
    help="Extension of page and archive templates",
)
@click.option(
    "--order",
    type=click.Choice(sorted(ORDERINGS)),
    default="semver",
    show_default=True,
    help="How the latest version is chosen",
)
@click.option(
    "--atomic/--no-atomic",
    default=False,
    help="Stage the build and publish only if every step succeeds (default: disabled)",
)
def build_command(
    source: Path | None,
    output: Path | None,
    template_ext: str,
    order: str,
    atomic: bool,
) -> None:
    """Render the site into the output directory.

    \b
    Reads from the site-source directory:
        config.json, versions/*.json, news/yyyy-MM-dd.json,
        pages/*, templates/*-archive-version*, resources/**

    \b
    Examples:
        webbuilder build                      # src/web -> current directory
        webbuilder build -s site -o public    # custom directories
        webbuilder build --order date         # latest = newest releaseDate
    """
    from webbuilder.builder import SiteBuilder
    from webbuilder.config import BuildOptions
    from webbuilder.errors import WebBuilderError

    options = BuildOptions(
        source_root=source or default_source_root(),
        output_root=output or default_output_root(),
        template_ext=template_ext,
        order=order,
        atomic=atomic,
    )

    click.echo(f"Building site from {options.source_root} to {options.output_root}...")

    try:
        result = SiteBuilder(options).build()
    except WebBuilderError as exc:
        click.echo(f"Error building site: {exc}", err=True)
        raise click.Abort() from exc

    click.echo(
        "Site generated: "
        f"{len(result.pages)} pages, "
        f"{len(result.versioned_pages)} version pages "
        f"({result.version_count} versions, {result.news_count} news)"
    )
    click.echo(f"Output: {result.output_root}")


__all__ = ["cli", "build_command"]
