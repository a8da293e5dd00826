from fastapi import FastAPI
from fastapi.routing import APIRoute


def api_routes(app: FastAPI) -> list[APIRoute]:
    return [route for route in app.routes if isinstance(route, APIRoute)]


def routes_named(app: FastAPI, name: str) -> list[APIRoute]:
    return [route for route in api_routes(app) if route.name == name]


def route_paths(app: FastAPI) -> dict[str, str]:
    return {route.name: route.path for route in api_routes(app)}
