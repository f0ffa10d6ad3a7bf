"""Tests for the ledger logging helpers."""

import logging
from unittest.mock import MagicMock

from tally_budget.infrastructure.logging import logger as logger_module


def _fixed_stamp(monkeypatch, stamp: str = "20250201") -> None:
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: stamp),
    )


def test_builder_writes_dated_file_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should log to <root>/logs/<subdir>/<stamp>_<prefix>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    _fixed_stamp(monkeypatch)

    builder = (
        logger_module.LoggerBuilder()
        .name("tally.test.transfers")
        .subdir("usage")
        .prefix("transfer_logs")
        .level(logging.WARNING)
    )
    built = builder.build()

    assert built.name == "tally.test.transfers"
    assert built.level == logging.WARNING
    assert built.propagate is False
    (file_handler,) = built.handlers
    expected = tmp_path / "logs" / "usage" / "20250201_transfer_logs.log"
    assert file_handler.baseFilename == str(expected)
    assert builder.build() is built


def test_builder_adds_console_handler_on_request(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    _fixed_stamp(monkeypatch)
    console = MagicMock(spec=logging.Handler)

    built = (
        logger_module.LoggerBuilder()
        .name("tally.test.console")
        .console(True)
        .console_handler(lambda fmt: console)
        .build()
    )

    assert console in built.handlers
    assert len(built.handlers) == 2


def test_project_root_honours_tally_home(tmp_path, monkeypatch):
    """TALLY_HOME should redirect log files away from the source tree."""
    monkeypatch.setenv("TALLY_HOME", str(tmp_path))
    _fixed_stamp(monkeypatch, "20250301")

    built = logger_module.LoggerBuilder().name("tally.test.home").build()

    (file_handler,) = built.handlers
    assert file_handler.baseFilename == str(
        tmp_path.resolve() / "logs" / "app" / "20250301_app_logs.log"
    )


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter at INFO."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    assert fmt._fmt == logger_module.DEFAULT_FORMAT
    file_handler.close()


def test_logger_wrapper_delegates_every_level(monkeypatch):
    """The singleton wrapper should forward each call to the real logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder, "build", lambda self: fake_logger
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("tally.test.wrapper")
    for level in ("info", "warning", "error", "debug", "critical"):
        getattr(wrapper, level)(f"{level} message")
    wrapper.exception("failed transfer")

    for level in ("info", "warning", "error", "debug", "critical"):
        getattr(fake_logger, level).assert_called_once_with(f"{level} message")
    fake_logger.exception.assert_called_once_with("failed transfer")
    assert logger_module.Logger("ignored") is wrapper


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger return their own instances."""
    built_names = []

    def _fake_build(self):
        built_names.append(self._name)
        return MagicMock(name=self._name)

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == ["tally.app", "tally.usage"]
