"""Tests for logging configuration helpers."""

import logging

import pytest

from entityscope.core.utils.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    set_component_level,
)


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logging.getLogger(f"{ROOT_LOGGER_NAME}.api.filters").setLevel(logging.NOTSET)


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("entityscope.api.filters").name == "entityscope.api.filters"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(level="INFO")
    configure_logging(level="ERROR")
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    installed = [h for h in logger.handlers if getattr(h, "_entityscope_handler", False)]
    assert len(installed) == 1
    assert logger.level == logging.ERROR


def test_verbose_forces_debug() -> None:
    logger = configure_logging(verbose=True, level="ERROR")
    assert logger.level == logging.DEBUG


def test_file_handler(tmp_path) -> None:
    log_file = tmp_path / "entityscope.log"
    configure_logging(level="INFO", file=str(log_file))
    get_logger("entityscope.test").info("hello file")
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_set_component_level() -> None:
    set_component_level("api.filters", "debug")
    assert logging.getLogger("entityscope.api.filters").level == logging.DEBUG
    set_component_level("entityscope.api.filters", logging.WARNING)
    assert logging.getLogger("entityscope.api.filters").level == logging.WARNING
