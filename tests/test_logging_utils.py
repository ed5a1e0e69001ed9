"""Tests for logging helpers."""

import io
import logging

import pytest

import cms_locale.utils.logging as logging_mod


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger("cms_locale")
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(logging_mod, "_configured", False)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_attaches_one_handler(package_logger):
    stream = io.StringIO()
    logging_mod.configure_logging("debug", stream=stream)
    logging_mod.configure_logging("info", stream=stream)

    added = [h for h in package_logger.handlers if getattr(h, "stream", None) is stream]
    assert len(added) == 1
    assert package_logger.level == logging.INFO

    logging_mod.get_logger("cms_locale.test").info("hello")
    assert "INFO [cms_locale.test] hello" in stream.getvalue()


def test_configure_logging_rejects_unknown_level(package_logger):
    with pytest.raises(ValueError, match="NOISY"):
        logging_mod.configure_logging("noisy")
