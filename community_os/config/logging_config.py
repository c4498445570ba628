import io
import logging
import sys
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from uuid import uuid4

from community_os.config.settings import Config

NO_CORRELATION_ID = "-"

# Set per request by CorrelationIdMiddleware
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION_ID)

NOISY_LOGGERS = ("httpx", "httpcore", "prisma", "prisma.engine", "multipart")


def bind_correlation_id(correlation_id: Optional[str] = None) -> tuple[str, Token]:
    """Bind a correlation id to the current context, generating one if missing."""
    value = (correlation_id or "").strip() or uuid4().hex
    return value, correlation_id_var.set(value)


def reset_correlation_id(token: Token) -> None:
    correlation_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the correlation id of the current request."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter for records emitted outside the filtered handlers (third-party threads)."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _stdout_stream():
    if hasattr(sys.stdout, "buffer"):
        return io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
    return sys.stdout


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    Third-party loggers stay at WARNING; the community_os hierarchy logs at
    `level`. Calling again only adjusts the level, so importing the app
    factory repeatedly (tests, reloads) never duplicates handlers.
    """
    root = logging.getLogger()
    app_level = getattr(logging, level.upper(), logging.INFO)
    if getattr(root, "_community_os_configured", False):
        logging.getLogger("community_os").setLevel(app_level)
        return root

    root.setLevel(logging.WARNING)
    formatter = SafeFormatter(Config.LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(_stdout_stream())]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(CorrelationIdFilter())
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("community_os").setLevel(app_level)
    root._community_os_configured = True
    return root
