import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from zed_endpoints import observability

pytestmark = pytest.mark.unit


@pytest.fixture
def fresh_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    if hasattr(root, "_zed_logging_configured"):
        delattr(root, "_zed_logging_configured")
    yield root
    if hasattr(root, "_zed_logging_configured"):
        delattr(root, "_zed_logging_configured")
    root.handlers = handlers
    root.setLevel(level)


def test_configure_structured_logging_success_and_idempotent(fresh_root_logger, monkeypatch):
    monkeypatch.setattr(observability.settings, "structured_logging", True)
    monkeypatch.setattr(observability.settings, "log_level", "DEBUG")

    assert observability.configure_structured_logging() is True
    assert observability.configure_structured_logging() is False

    [handler] = fresh_root_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert fresh_root_logger.level == logging.DEBUG


def test_configure_plain_logging_when_structured_disabled(fresh_root_logger, monkeypatch):
    monkeypatch.setattr(observability.settings, "structured_logging", False)

    assert observability.configure_structured_logging() is True

    [handler] = fresh_root_logger.handlers
    assert not isinstance(handler.formatter, JsonFormatter)


def test_group_mapping_is_logged_with_context(app, caplog):
    from tests.fixtures import inheritance
    from zed_endpoints import map_endpoint_groups

    with caplog.at_level(logging.INFO, logger="zed_endpoints.extensions"):
        map_endpoint_groups(app, inheritance, "api/v1")

    mapped = {
        record.endpoint_group: record.prefixed
        for record in caplog.records
        if hasattr(record, "endpoint_group")
    }
    assert mapped == {
        "tests.fixtures.inheritance.StatusEndpointGroup": False,
        "tests.fixtures.inheritance.DetailedStatusEndpointGroup": True,
    }
