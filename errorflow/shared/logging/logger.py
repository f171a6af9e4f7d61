"""Loguru setup with a per-request id on every record."""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from types import FrameType
from typing import Any

from loguru import logger

_FMT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<lvl>{level:<7}</lvl> "
    "<magenta>[{extra[request_id]}]</magenta> "
    "<cyan>{module}</cyan> "
    "<lvl>{message}</lvl>"
)

_NO_REQUEST = "-"
_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default=_NO_REQUEST)


def _attach_request_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("request_id", _REQUEST_ID.get())


class _StdlibBridge(logging.Handler):
    """Forward stdlib records (werkzeug, flask) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def set_request_id(value: str | None) -> None:
    _REQUEST_ID.set(value or _NO_REQUEST)


def reset_request_id() -> None:
    _REQUEST_ID.set(_NO_REQUEST)


def setup_logging(level: str | None = None, log_file: str | os.PathLike | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    logger.remove()
    logger.configure(extra={"request_id": _NO_REQUEST}, patcher=_attach_request_id)
    logger.add(sys.stderr, level=level, format=_FMT, colorize=True, diagnose=False)
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format=_FMT,
            colorize=False,
            diagnose=False,
            enqueue=True,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)


logger.configure(patcher=_attach_request_id)

__all__ = ["logger", "reset_request_id", "set_request_id", "setup_logging"]
