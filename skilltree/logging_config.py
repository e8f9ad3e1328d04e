"""
Central logging configuration for the skill tree engine.

Provides:
- Structured logging (JSON in production, human-readable in development)
- Catalog correlation via contextvars (catalog_id set while a graph is built)
- Environment-aware log levels

Usage:
    from skilltree.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Graph rebuilt", extra={"node_count": len(nodes)})
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

# Id of the catalog currently being built or queried
catalog_id_var: ContextVar[Optional[str]] = ContextVar("catalog_id", default=None)

_RESERVED_ATTRS = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName", "catalog_id",
    )
)


def get_catalog_id() -> Optional[str]:
    """Get the current catalog ID from context, if set."""
    return catalog_id_var.get()


@contextmanager
def catalog_context(catalog_id: Optional[str]) -> Iterator[None]:
    """Tag every record logged inside the block with ``catalog_id``."""
    token = catalog_id_var.set(catalog_id)
    try:
        yield
    finally:
        catalog_id_var.reset(token)


class CatalogIdFilter(logging.Filter):
    """Filter that adds catalog_id to log records from context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.catalog_id = get_catalog_id() or "-"  # type: ignore[attr-defined]
        return True


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        catalog_id = getattr(record, "catalog_id", None)
        if catalog_id and catalog_id != "-":
            log_obj["catalog_id"] = catalog_id

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Fields passed via extra= in the log call
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or value is None:
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        return json.dumps(log_obj)


def _create_dev_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] catalog=%(catalog_id)s %(message)s",
        datefmt="%H:%M:%S",
    )


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Configure engine-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'development' or 'production'
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates on reconfigure
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(CatalogIdFilter())

    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(_create_dev_formatter())

    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name.

    Records carry catalog_id when logged inside ``catalog_context``.
    Use extra={} for additional structured fields:
        logger.info("Completed", extra={"course_id": course_id})
    """
    return logging.getLogger(name)
