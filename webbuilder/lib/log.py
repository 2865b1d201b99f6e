"""Structured logging for site builds.

Every build event goes to stderr through structlog. Build steps bind
``step`` with :func:`log_context`, so events emitted while a step runs
(``created`` for each page, errors) carry the step that produced them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import PurePath
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def _stderr_logger(*_args: Any) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so click's CliRunner capture works
    return structlog.PrintLogger(sys.stderr)


def _paths_as_text(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Render ``Path`` values (output files, descriptors) as plain strings."""
    for key, value in event_dict.items():
        if isinstance(value, PurePath):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Set up console or JSON build logs; safe to call once per CLI run."""
    level = logging.DEBUG if verbose else logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _paths_as_text,
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # not cached: repeated invocations in one process may reconfigure
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Bind ``values`` to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(**values):
        yield


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger", "log_context"]
