import logging

from avsrc.util.logging_utils import configure_logging, get_logger


def test_get_logger_configures_root():
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logger = get_logger("avsrc.test_logger")
    assert logger is logging.getLogger("avsrc.test_logger")
    assert logging.getLogger().handlers, "Root logger should have handlers after configuration"


def test_configure_logging_respects_environment(monkeypatch):
    monkeypatch.delenv("AVSRC_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_project_level_variable_takes_precedence(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("AVSRC_LOG_LEVEL", "warning")
    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_get_logger_accepts_level_names():
    logger = get_logger("avsrc.named_level", level="error")
    assert logger.level == logging.ERROR
