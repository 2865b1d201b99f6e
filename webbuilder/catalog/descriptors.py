"""Parsing of a single descriptor file into a pydantic model."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from webbuilder.errors import BuildIOError, DataError
from webbuilder.lib.json import JSONDecodeError, load_file

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_descriptor(path: Path, model: type[ModelT]) -> ModelT:
    try:
        raw = load_file(path)
    except OSError as exc:
        raise BuildIOError(f"Cannot read {path}: {exc}", path=path) from exc
    except JSONDecodeError as exc:
        raise DataError(f"{path} is not valid JSON: {exc}", path=path) from exc
    if not isinstance(raw, dict):
        raise DataError(f"{path} must contain a JSON object", path=path)
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise DataError(f"Invalid {model.__name__.lower()} descriptor {path}: {exc}", path=path) from exc
