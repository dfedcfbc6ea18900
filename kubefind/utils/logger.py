"""Logging configuration."""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

ROOT_LOGGER = "kubefind"


class StructuredAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches key/value fields to every record.

    Fields travel as a single ``fields`` mapping on the record so that keys
    such as ``name`` do not collide with LogRecord attributes.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        fields: Dict[str, Any] = {**self.extra, **extra.pop("fields", {})}
        extra["fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs


class KeyValueFormatter(logging.Formatter):
    """Formatter that appends structured fields as ``key=value`` pairs."""

    def __init__(self, fmt: Optional[str] = None):
        super().__init__(fmt or "%(asctime)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        output = super().format(record)

        fields = getattr(record, "fields", None)
        if fields:
            pairs = " ".join(f"{key}={value}" for key, value in fields.items())
            output = f"{output} {pairs}"

        return output


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``kubefind`` hierarchy."""
    return logging.getLogger(name or ROOT_LOGGER)


def bind_logger(logger: logging.Logger, **fields: Any) -> StructuredAdapter:
    """Return an adapter attaching ``fields`` to every record it emits."""
    return StructuredAdapter(logger, fields)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install a single stderr handler on the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(KeyValueFormatter())
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
