"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from lm_sidekick.logging_config import SERVICE_NAME, configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _reset_logger(restore_logger):
    yield


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "name, level",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Error", logging.ERROR), ("loud", logging.INFO)],
    )
    def test_resolve_level(self, name, level):
        assert resolve_level(name) == level

    def test_console_only(self):
        logger = configure_logging("warning")

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_rotating_files(self, tmp_path):
        logger = configure_logging("debug", tmp_path / "logs")
        logger.error("backend exploded")
        logger.info("all good")
        for handler in logger.handlers:
            handler.flush()

        error_log = (tmp_path / "logs" / "error.log").read_text()
        combined = (tmp_path / "logs" / "combined.log").read_text()
        assert "backend exploded" in error_log
        assert "all good" not in error_log
        assert "all good" in combined

    def test_reconfiguring_replaces_handlers(self, tmp_path):
        configure_logging("info", tmp_path)
        logger = configure_logging("info")

        assert len(logger.handlers) == 1

    def test_records_carry_service_name(self, tmp_path):
        logger = configure_logging("info", tmp_path)
        logger.getChild("dispatcher").info("tool ran")
        for handler in logger.handlers:
            handler.flush()

        line = (tmp_path / "combined.log").read_text().strip()
        assert f"{SERVICE_NAME} [lm_sidekick.dispatcher] INFO tool ran" in line
