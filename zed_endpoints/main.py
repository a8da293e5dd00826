from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional, Union

from fastapi import FastAPI

from .config import settings
from .extensions import map_endpoint_groups
from .observability import configure_structured_logging

logger = logging.getLogger(__name__)


def create_app(
    module: Union[ModuleType, str, None] = None,
    global_prefix: Optional[str] = None,
) -> FastAPI:
    """Build a FastAPI application with its endpoint groups mapped.

    ``module`` and ``global_prefix`` default to ``APPLICATION_MODULE`` and
    ``GLOBAL_PREFIX``. Without a module the application starts with no
    discovered groups.
    """
    configure_structured_logging()

    app = FastAPI(title=settings.app_title)
    target = module if module is not None else settings.application_module
    if target is None:
        logger.warning("No application module configured; no endpoint groups mapped")
        return app

    prefix = global_prefix if global_prefix is not None else settings.global_prefix
    return map_endpoint_groups(app, target, prefix)
