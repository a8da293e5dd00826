from __future__ import annotations

import inspect
import logging
import threading
from dataclasses import dataclass, field
from importlib import import_module
from pkgutil import walk_packages
from types import ModuleType
from typing import Iterator, Optional, TypeVar, Union

from fastapi import APIRouter, FastAPI

from .abstractions import Endpoint, EndpointGroup
from .attributes import has_no_global_prefix
from .config import settings
from .errors import EndpointConfigurationError
from .paths import normalize_prefix

logger = logging.getLogger(__name__)

SurfaceT = TypeVar("SurfaceT", FastAPI, APIRouter)

_TRACKER_ATTRIBUTE = "zed_endpoint_group_tracker"
_TRACKER_LOCK = threading.Lock()


@dataclass
class _MappingTracker:
    modules: set[str] = field(default_factory=set)
    groups: set[type[EndpointGroup]] = field(default_factory=set)
    lock: threading.Lock = field(default_factory=threading.Lock)

    def claim_module(self, module_name: str) -> bool:
        with self.lock:
            if module_name in self.modules:
                return False
            self.modules.add(module_name)
            return True

    def claim_group(self, group: type[EndpointGroup]) -> bool:
        with self.lock:
            if group in self.groups:
                return False
            self.groups.add(group)
            return True


def _mapping_tracker(app: FastAPI) -> _MappingTracker:
    with _TRACKER_LOCK:
        tracker = getattr(app.state, _TRACKER_ATTRIBUTE, None)
        if tracker is None:
            tracker = _MappingTracker()
            setattr(app.state, _TRACKER_ATTRIBUTE, tracker)
        return tracker


def map_endpoint(app: SurfaceT, endpoint: type[Endpoint]) -> SurfaceT:
    """Register ``endpoint`` on ``app`` and return ``app`` for chaining."""
    if not (isinstance(endpoint, type) and issubclass(endpoint, Endpoint)):
        raise TypeError(f"{endpoint!r} is not an Endpoint subclass")
    if inspect.isabstract(endpoint):
        raise TypeError(f"{endpoint.__qualname__} does not implement map()")

    endpoint.map(app)
    logger.debug("Mapped endpoint %s", endpoint.__qualname__)
    return app


def map_endpoints(app: SurfaceT, *endpoints: type[Endpoint]) -> SurfaceT:
    for endpoint in endpoints:
        map_endpoint(app, endpoint)
    return app


def _is_missing_module(exc: ModuleNotFoundError, module_name: str) -> bool:
    if not exc.name:
        return False
    return module_name == exc.name or module_name.startswith(f"{exc.name}.")


def _resolve_module(module: Union[ModuleType, str, None]) -> ModuleType:
    if isinstance(module, ModuleType):
        return module

    module_name = module if module is not None else settings.application_module
    if not module_name:
        raise EndpointConfigurationError(
            "No module was given and APPLICATION_MODULE is not configured"
        )

    try:
        return import_module(module_name)
    except ModuleNotFoundError as exc:
        if _is_missing_module(exc, module_name):
            raise EndpointConfigurationError(
                f"Entry module {module_name!r} could not be found",
                module=module_name,
            ) from exc
        raise


def _iter_scanned_modules(module: ModuleType) -> Iterator[ModuleType]:
    yield module

    package_paths = getattr(module, "__path__", None)
    if not package_paths:
        return

    for module_info in walk_packages(package_paths, prefix=f"{module.__name__}."):
        yield import_module(module_info.name)


def discover_endpoint_groups(module: ModuleType) -> list[type[EndpointGroup]]:
    """Return the concrete endpoint groups defined in ``module``.

    Packages are walked recursively. Classes merely imported into a scanned
    module are skipped; they are picked up from the module that defines them.
    """
    seen: set[type[EndpointGroup]] = set()
    groups: list[type[EndpointGroup]] = []
    for scanned in _iter_scanned_modules(module):
        for candidate in list(vars(scanned).values()):
            if not isinstance(candidate, type) or candidate in seen:
                continue
            if candidate.__module__ != scanned.__name__:
                continue
            if not issubclass(candidate, EndpointGroup) or inspect.isabstract(candidate):
                continue
            seen.add(candidate)
            groups.append(candidate)
    return groups


def _instantiate_group(group: type[EndpointGroup]) -> EndpointGroup:
    try:
        signature = inspect.signature(group)
    except ValueError:
        return group()

    try:
        signature.bind()
    except TypeError as exc:
        raise EndpointConfigurationError(
            f"Endpoint group {group.__qualname__} must be constructible without arguments",
            module=group.__module__,
            group=group,
        ) from exc
    return group()


def map_endpoint_groups(
    app: FastAPI,
    module: Union[ModuleType, str, None] = None,
    global_prefix: Optional[str] = None,
) -> FastAPI:
    """Discover the endpoint groups in ``module`` and map them onto ``app``.

    ``module`` defaults to ``settings.application_module``. Each module is
    scanned at most once per application; later calls for the same module
    return immediately, whatever ``global_prefix`` they pass. A group already
    mapped through an overlapping scan (a package, then one of its
    submodules) is not mapped again. Groups decorated with
    :func:`~zed_endpoints.attributes.no_global_prefix` are mapped onto ``app``
    directly.
    """
    resolved = _resolve_module(module)
    tracker = _mapping_tracker(app)
    if not tracker.claim_module(resolved.__name__):
        logger.debug("Endpoint groups in %s are already mapped", resolved.__name__)
        return app

    prefix = normalize_prefix(global_prefix)
    prefixed_router = APIRouter(prefix=prefix) if prefix else None

    mapped = 0
    try:
        for group in discover_endpoint_groups(resolved):
            if not tracker.claim_group(group):
                logger.debug("Endpoint group %s is already mapped", group.__qualname__)
                continue
            instance = _instantiate_group(group)
            opted_out = has_no_global_prefix(group)
            target = app if opted_out or prefixed_router is None else prefixed_router
            instance.map_group(target)
            mapped += 1
            logger.info(
                "Mapped endpoint group %s",
                group.__qualname__,
                extra={
                    "endpoint_group": f"{group.__module__}.{group.__qualname__}",
                    "scanned_module": resolved.__name__,
                    "prefixed": target is prefixed_router,
                },
            )
    finally:
        # Groups mapped before a failure keep their routes.
        if prefixed_router is not None:
            app.include_router(prefixed_router)

    logger.info(
        "Mapped %d endpoint group(s) from %s",
        mapped,
        resolved.__name__,
        extra={"scanned_module": resolved.__name__, "global_prefix": prefix or None},
    )
    return app
