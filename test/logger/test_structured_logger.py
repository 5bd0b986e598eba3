"""Tests for the css_editor.logger implementations."""

import logging

from css_editor.logger import ConsoleLogger, DefaultLogger, Logger, session_logger


def test_default_logger_renders_context(caplog):
    logger = DefaultLogger(name="css_editor_test.default")

    with caplog.at_level(logging.DEBUG, logger="css_editor_test.default"):
        logger.error("Failed to save CSS file for theme", theme="basic", error="disk full")
        logger.info("No context")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Failed to save CSS file for theme | theme=basic error=disk full",
        "No context",
    ]
    assert caplog.records[0].levelno == logging.ERROR


def test_console_logger_attaches_single_handler():
    first = ConsoleLogger(name="css_editor_test.console")
    ConsoleLogger(name="css_editor_test.console")

    handlers = logging.getLogger("css_editor_test.console").handlers
    assert len(handlers) == 1
    assert first.name == "css_editor_test.console"


def test_console_logger_writes_to_stdout(capsys):
    logger = ConsoleLogger(name="css_editor_test.stdout", level=logging.INFO)

    logger.warning("Directory is not writable", uri="public://css_editor")

    assert "Directory is not writable | uri=public://css_editor" in capsys.readouterr().out


def test_session_logger_is_a_logger():
    assert isinstance(session_logger, Logger)
