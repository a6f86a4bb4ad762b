from __future__ import annotations

import logging

import pytest

from smarttext.utils.logger import setup_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("smarttext")
    saved = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in saved[0]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[1])


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_smarttext_handler", False)]


def test_default_stderr_handler_at_warning() -> None:
    logger = setup_logging()
    handlers = _own_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING
    assert logger.level == logging.INFO


def test_verbose_lowers_levels() -> None:
    logger = setup_logging(log_level="ERROR", verbose=True)
    assert logger.level == logging.DEBUG
    assert _own_handlers(logger)[0].level == logging.DEBUG


def test_repeated_setup_replaces_handlers() -> None:
    setup_logging()
    logger = setup_logging(log_level="DEBUG")
    assert len(_own_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_foreign_handlers_kept() -> None:
    logger = logging.getLogger("smarttext")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    setup_logging()
    assert foreign in logger.handlers


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "logs" / "smarttext.log"
    logger = setup_logging(log_file=str(log_file), log_level="DEBUG")
    logging.getLogger("smarttext.parsing").debug("hello %s", "file")
    for handler in _own_handlers(logger):
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    assert "[DEBUG] smarttext.parsing" in log_file.read_text(encoding="utf-8")
