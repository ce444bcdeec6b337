"""Log formatting for applications embedding the client."""

from __future__ import annotations

import json
import logging

from aptos_rest.config import AptosConfig

EXTRA_FIELDS = ("origin_method", "status", "error")
HANDLER_MARKER = "_aptos_rest_handler"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def resolve_level(level_name: str) -> int:
    level = getattr(logging, level_name.upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: AptosConfig) -> logging.Handler:
    """
    Attach a stream handler to the ``aptos_rest`` logger per ``config``.

    Calling again replaces the handler installed by the previous call, so
    reconfiguring never duplicates output.
    """
    package_logger = logging.getLogger("aptos_rest")
    for existing in list(package_logger.handlers):
        if getattr(existing, HANDLER_MARKER, False):
            package_logger.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler()
    setattr(handler, HANDLER_MARKER, True)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger.setLevel(resolve_level(config.log_level))
    package_logger.addHandler(handler)
    return handler
