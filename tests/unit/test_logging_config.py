"""Tests for the contextual logging configuration."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from backlog_bridge.logging_config import (
    ContextualLogger,
    get_logger,
    log_operation,
    setup_logger,
)


@pytest.fixture(autouse=True)
def clean_context():
    """The operation context is per thread and shared by all loggers."""
    get_logger("backlog-bridge").clear_context()
    yield
    get_logger("backlog-bridge").clear_context()


@pytest.fixture
def logger_name(request):
    return f"backlog-bridge-test.{request.node.name}"


def test_get_logger_returns_contextual_logger(logger_name):
    logger = get_logger(logger_name)

    assert isinstance(logger, ContextualLogger)
    assert logging.getLoggerClass() is not ContextualLogger


def test_log_operation_sets_and_restores_context(logger_name, caplog):
    logger = get_logger(logger_name)
    logger.set_context(space="demo")

    with caplog.at_level(logging.DEBUG, logger=logger_name):
        with log_operation(logger, "get_projects", trace_id="abc12345"):
            assert logger.get_context() == {
                "space": "demo",
                "operation": "get_projects",
                "trace_id": "abc12345",
            }
            logger.info("inside")

    assert logger.get_context() == {"space": "demo"}
    inside = [r for r in caplog.records if r.getMessage() == "inside"][0]
    assert "operation=get_projects" in inside.context
    assert "Operation started: get_projects" in caplog.text
    assert "Operation completed: get_projects" in caplog.text


def test_context_is_shared_between_loggers(logger_name, caplog):
    dispatcher_logger = get_logger(f"{logger_name}.dispatcher")
    transport_logger = get_logger(f"{logger_name}.backlog")

    with caplog.at_level(logging.DEBUG, logger=logger_name):
        with log_operation(dispatcher_logger, "get_statuses", trace_id="feed0001"):
            transport_logger.debug("sending")
        transport_logger.debug("after")

    sending = [r for r in caplog.records if r.getMessage() == "sending"][0]
    after = [r for r in caplog.records if r.getMessage() == "after"][0]
    assert "operation=get_statuses" in sending.context
    assert "trace_id=feed0001" in sending.context
    assert after.context == "no-context"


def test_log_operation_logs_failure(logger_name, caplog):
    logger = get_logger(logger_name)

    with caplog.at_level(logging.INFO, logger=logger_name):
        with pytest.raises(RuntimeError):
            with log_operation(logger, "find_issue"):
                raise RuntimeError("boom")

    assert "Operation failed: find_issue" in caplog.text
    assert logger.get_context() == {}


def test_setup_logger_console_only(logger_name):
    logger = setup_logger(logger_name, level="debug", log_to_file=False)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_twice_does_not_duplicate(logger_name):
    setup_logger(logger_name, log_to_file=False)
    logger = setup_logger(logger_name, log_to_file=False)

    assert len(logger.handlers) == 1


def test_setup_logger_with_file(logger_name, tmp_path):
    logger = setup_logger(logger_name, log_to_file=True, log_dir=str(tmp_path))

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    logger.info("written")
    file_handlers[0].flush()
    assert "written" in (tmp_path / f"{logger_name}.log").read_text()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
