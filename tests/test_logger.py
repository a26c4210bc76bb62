import logging

import pytest

from utils import logger as logger_module


@pytest.fixture
def root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logger_module, "_initialized", False)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_host_configured_root_is_left_alone(root, monkeypatch):
    host_handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [host_handler])
    root.setLevel(logging.WARNING)

    logger_module.get_logger("repositories.record_repo")

    assert root.handlers == [host_handler]
    assert root.level == logging.WARNING


def test_fallback_handler_added_once_when_unconfigured(root, monkeypatch):
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(logger_module, "LOG_LEVEL", "DEBUG")

    log = logger_module.get_logger("db.connection")
    logger_module.get_logger("repositories.record_repo")

    assert log.name == "db.connection"
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.level == logging.DEBUG
