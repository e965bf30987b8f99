"""Tests for colb's diagnostic logger."""

import logging

from colb.core.bootstrap import bootstrap
from colb.core.interfaces.logger import ILogger
from colb.core.models.config import LoggingConfig
from colb.core.settings import ColbSettings
from colb.services.logging import ColbLogger, NullLogger, get_logger


class TestColbLogger:
    def test_silent_by_default(self, tmp_path):
        logger = ColbLogger(name="colb.test.default", log_file=tmp_path / "colb.log")

        logger.warning("not written anywhere")

        assert [type(h) for h in logger.handlers] == [logging.NullHandler]
        assert not (tmp_path / "colb.log").exists()

    def test_file_output_respects_level(self, tmp_path):
        log_file = tmp_path / "logs" / "colb.log"
        logger = ColbLogger(
            LoggingConfig(level="info", file=True),
            name="colb.test.file",
            log_file=log_file,
        )

        logger.debug("hidden %s", "detail")
        logger.info("ran %s", "colcon")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "[INFO] colb.test.file: ran colcon" in content
        assert "hidden" not in content

    def test_console_output(self, capsys):
        logger = ColbLogger(LoggingConfig(level="debug", console=True), name="colb.test.console")

        logger.error("could not launch %s", "ninja")

        assert "could not launch ninja" in capsys.readouterr().err

    def test_recreating_replaces_handlers(self, tmp_path):
        ColbLogger(LoggingConfig(console=True), name="colb.test.twice")
        logger = ColbLogger(name="colb.test.twice")
        assert len(logger.handlers) == 1


class TestGetLogger:
    def test_null_logger_before_bootstrap(self):
        assert isinstance(get_logger(), NullLogger)

    def test_registered_logger_after_bootstrap(self):
        bootstrap(ColbSettings())
        logger = get_logger()
        assert isinstance(logger, ColbLogger)
        assert logger is get_logger()

    def test_null_logger_accepts_all_levels(self):
        logger: ILogger = NullLogger()
        logger.debug("a")
        logger.info("b %d", 1)
        logger.warning("c")
        logger.error("d")
