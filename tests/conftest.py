import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tests.fixtures import sample
from zed_endpoints import map_endpoint_groups


@pytest.fixture
def app() -> FastAPI:
    return FastAPI()


@pytest.fixture
def prefixed_app(app: FastAPI) -> FastAPI:
    return map_endpoint_groups(app, sample, "api/v1")


@pytest.fixture
def client(prefixed_app: FastAPI):
    with TestClient(prefixed_app) as test_client:
        yield test_client
