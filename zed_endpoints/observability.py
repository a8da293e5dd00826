from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from .config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_structured_logging() -> bool:
    root = logging.getLogger()
    if getattr(root, "_zed_logging_configured", False):
        return False

    handler = logging.StreamHandler()
    if settings.structured_logging:
        handler.setFormatter(JsonFormatter(_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root.handlers = [handler]
    root.setLevel(settings.log_level)
    setattr(root, "_zed_logging_configured", True)
    return True
