"""Loading of the site configuration descriptor and build options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from webbuilder.errors import ConfigError
from webbuilder.lib.json import JSONDecodeError, load_file
from webbuilder.models import SiteConfig
from webbuilder.paths import (
    DEFAULT_OUTPUT_EXT,
    DEFAULT_TEMPLATE_EXT,
    default_output_root,
    default_source_root,
)


@dataclass
class BuildOptions:
    """How and where a build runs."""

    source_root: Path = field(default_factory=default_source_root)
    output_root: Path = field(default_factory=default_output_root)
    template_ext: str = DEFAULT_TEMPLATE_EXT
    output_ext: str = DEFAULT_OUTPUT_EXT
    order: str = "semver"  # key into catalog.versions.ORDERINGS
    atomic: bool = False

    def __post_init__(self) -> None:
        self.source_root = Path(self.source_root)
        self.output_root = Path(self.output_root)
        if not self.template_ext.startswith("."):
            self.template_ext = f".{self.template_ext}"
        if not self.output_ext.startswith("."):
            self.output_ext = f".{self.output_ext}"


def load_config(path: Path) -> SiteConfig:
    """Load and validate ``config.json``.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or fails
            validation (``maxNews`` absent or negative).
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", path=path)
    try:
        raw = load_file(path)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}", path=path) from exc
    except JSONDecodeError as exc:
        raise ConfigError(f"Config {path} is not valid JSON: {exc}", path=path) from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a JSON object", path=path)
    try:
        return SiteConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}", path=path) from exc


__all__ = ["BuildOptions", "load_config"]
