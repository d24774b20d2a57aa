"""Tests for logging setup and service log lines."""

import logging

import pytest

from collection_services.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Give the root and uvicorn loggers a clean, restorable state."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        monkeypatch.setattr(logger, "level", logger.level)
    yield root
    for handler in root.handlers:
        handler.close()


def test_setup_logging_installs_handlers_once(bare_root, tmp_path):
    logfile = tmp_path / "services.log"

    assert setup_logging("debug", str(logfile)) is True
    assert len(bare_root.handlers) == 2
    assert bare_root.level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG

    assert setup_logging("error") is False
    assert len(bare_root.handlers) == 2


def test_unknown_level_falls_back_to_info(bare_root):
    setup_logging("verbose")

    assert bare_root.level == logging.INFO


def test_create_is_logged(products_client, caplog):
    with caplog.at_level(logging.INFO, logger="collection_services"):
        products_client.post("/products", json={"name": "pen"})
        products_client.post("/products", json={"name": "book"})

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("collection_services")]
    assert messages == ["Created product record (1 stored)", "Created product record (2 stored)"]
