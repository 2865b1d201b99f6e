"""Main entry point for the webbuilder CLI."""

from webbuilder.cli import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
