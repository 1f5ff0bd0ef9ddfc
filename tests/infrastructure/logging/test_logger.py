"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from fleetledger.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_daily_file(tmp_path, monkeypatch):
    """LoggerBuilder should log into the dated file of its subdir."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240615"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("fleetledger.test.reports")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.WARNING)
    )
    report_logger = builder.build()

    try:
        assert report_logger.level == logging.WARNING
        assert report_logger.propagate is False
        assert len(report_logger.handlers) == 1
        handler = report_logger.handlers[0]
        expected = tmp_path / "logs" / "reports" / "20240615_report_logs.log"
        assert handler.baseFilename == str(expected)
        assert builder.build() is report_logger
        assert len(report_logger.handlers) == 1
    finally:
        for handler in list(report_logger.handlers):
            handler.close()
            report_logger.removeHandler(handler)


def test_builder_uses_custom_handler_factories(tmp_path, monkeypatch):
    """Injected factories receive the formatter and log path."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    seen = {}

    def file_factory(path, formatter):
        seen["path"] = path
        seen["file_fmt"] = formatter
        return logging.NullHandler()

    def console_factory(formatter):
        seen["console_fmt"] = formatter
        return logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("fleetledger.test.factories")
        .subdir("custom")
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    try:
        assert seen["file_fmt"] is fmt
        assert seen["console_fmt"] is fmt
        assert seen["path"].parent == tmp_path / "logs" / "custom"
        assert len(built.handlers) == 2
    finally:
        for handler in list(built.handlers):
            built.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    try:
        assert isinstance(file_handler, logging.FileHandler)
        assert file_handler.level == logging.INFO
        assert file_handler.formatter is fmt
        assert isinstance(console_handler, logging.StreamHandler)
        assert console_handler.formatter is fmt
    finally:
        file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("fleetledger.test")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """get_app_logger and get_usage_logger each return one instance."""
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("fleetledger.app", "app"),
        ("fleetledger.usage", "usage"),
    ]
