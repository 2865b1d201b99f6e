"""Webbuilder error hierarchy.

All project exceptions inherit from WebBuilderError, enabling:
- ``except WebBuilderError`` at the top-level boundary (CLI)
- Fine-grained catches deeper in the stack (``except DataError``)

Hierarchy:
    WebBuilderError
    ├── ConfigError          # config.json missing or invalid
    ├── EmptyCatalogError    # no version descriptors
    ├── DataError            # version/news descriptor or news filename
    ├── RenderError          # template missing or failing
    └── BuildIOError         # filesystem read/write failure
"""

from __future__ import annotations

from pathlib import Path


class WebBuilderError(Exception):
    """Base class for all webbuilder errors."""


class ConfigError(WebBuilderError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class EmptyCatalogError(WebBuilderError):
    def __init__(self, directory: Path) -> None:
        super().__init__(f"No version descriptors found in {directory}")
        self.directory = directory


class DataError(WebBuilderError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class RenderError(WebBuilderError):
    def __init__(self, message: str, *, template: str) -> None:
        super().__init__(message)
        self.template = template


class BuildIOError(WebBuilderError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "BuildIOError",
    "ConfigError",
    "DataError",
    "EmptyCatalogError",
    "RenderError",
    "WebBuilderError",
]
