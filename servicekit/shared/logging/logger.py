"""Structured logging utilities.

Sinks are configured once with ``setup_logging``. Components never log
through a module-level logger: they receive the instance built by
``new_logger`` and bind request data onto it.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger as _logger

if TYPE_CHECKING:
    from loguru import Logger, Record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.bind(correlation_id=_CORRELATION_ID.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


def _patch_correlation_id(record: Record) -> None:
    record["extra"]["correlation_id"] = _CORRELATION_ID.get()


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(
    level: str | None = None,
    *,
    serialize: bool = True,
    log_file: str | Path | None = None,
    sink: TextIO | None = None,
) -> None:
    level = (level or "INFO").upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    _logger.add(
        sink or sys.stdout,
        level=level,
        format=_FMT,
        serialize=serialize,
        colorize=not serialize,
        backtrace=False,
        diagnose=False,
    )
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            str(log_file),
            level=level,
            format=_FMT,
            serialize=serialize,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=True,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def new_logger(**extra: Any) -> Logger:
    """Build the logger handed to the middleware and error handling.

    ``extra`` (service name, version ...) is attached to every record.
    """
    return _logger.bind(**extra).patch(_patch_correlation_id)


__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "new_logger",
    "set_correlation_id",
    "setup_logging",
]
