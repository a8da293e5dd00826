"""Contracts implemented by application endpoints and endpoint groups.

An :class:`Endpoint` maps a single route and is used at class level, without
an instance. An :class:`EndpointGroup` maps a cohesive set of routes, usually
under a shared sub-router, and is instantiated by
:func:`zed_endpoints.extensions.map_endpoint_groups` when its module is
scanned::

    class CreateUser(Endpoint):
        @classmethod
        def map(cls, app: RouteSurface) -> None:
            app.add_api_route("/", create_user, methods=["POST"], name="CreateUser")


    class UsersGroup(EndpointGroup):
        def map_group(self, app: RouteSurface) -> None:
            router = APIRouter(prefix="/users", tags=["Users"])
            map_endpoints(router, CreateUser, GetUser)
            app.include_router(router)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from fastapi import APIRouter, FastAPI

RouteSurface = Union[FastAPI, APIRouter]


class Endpoint(ABC):
    @classmethod
    @abstractmethod
    def map(cls, app: RouteSurface) -> None:
        """Register this endpoint's route on ``app``."""


class EndpointGroup(ABC):
    @abstractmethod
    def map_group(self, app: RouteSurface) -> None:
        """Register this group's routes on ``app``.

        Groups must be constructible without arguments.
        """
