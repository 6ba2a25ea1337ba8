"""Тесты конфигурации logger."""

import logging

from src.fluent.logger import LoggingConfig, setup_logger


class TestSetupLogger:

    def test_configures_once(self):
        log = setup_logger("fluent.test_configures_once", LoggingConfig(level="DEBUG"))
        assert log.level == logging.DEBUG
        assert len(log.handlers) == 1
        assert log.propagate is False

        again = setup_logger("fluent.test_configures_once", LoggingConfig(level="ERROR"))
        assert again is log
        assert len(again.handlers) == 1
        assert again.level == logging.DEBUG

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        log = setup_logger("fluent.test_level_from_env")
        assert log.level == logging.WARNING
