import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from fastapi import Request
from framework.config import settings

LOG_DIR = Path(settings.LOG_DIR)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<magenta>Trace:{extra[trace_id]}</magenta> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | Trace:{extra[trace_id]} - {message}"


class LogConfig:
    """Global logging configuration using Loguru."""
    @classmethod
    def setup_logging(cls, level: Optional[str] = None):
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.remove()

        logger.add(
            sys.stdout,
            enqueue=True,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=CONSOLE_FORMAT,
            level=level or settings.LOG_LEVEL,
        )

        logger.add(
            LOG_DIR / "app_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            compression="zip",
            enqueue=True,
            format=FILE_FORMAT,
            level="DEBUG",
        )

        logger.add(
            LOG_DIR / "error_{time:YYYY-MM-DD}.log",
            level="ERROR",
            rotation="100 MB",
            enqueue=True,
            format=FILE_FORMAT,
        )

        logger.configure(extra={"trace_id": "system"})


def get_logger(name: str = None, request: Optional[Request] = None):
    """Get logger instance; pass request to pin its trace_id.

    Without a request the trace_id is resolved per record: the one set by
    LoggingMiddleware via logger.contextualize, else the "system" default.
    Module-level loggers therefore stay request-aware.
    """
    extra = {}
    if name:
        extra["name"] = name
    if request is not None:
        extra["trace_id"] = getattr(request.state, "trace_id", "unknown")
    return logger.bind(**extra)
