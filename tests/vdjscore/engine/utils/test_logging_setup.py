from __future__ import annotations

import logging

from vdjscore.engine.utils.config import LoggingSettings
from vdjscore.engine.utils.logging import LOG_FORMAT, get_logger, setup_logging


class TestSetupLogging:
    def test_console_handler_added(self):
        settings = LoggingSettings(level="INFO", file="", console=True)
        logger = setup_logging(settings)
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_file_handler_added(self, tmp_path):
        log_file = str(tmp_path / "logs" / "scoring.log")
        settings = LoggingSettings(level="DEBUG", file=log_file, console=False)
        logger = setup_logging(settings)
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert (tmp_path / "logs" / "scoring.log").exists()
        logger.handlers.clear()

    def test_no_handlers_when_both_disabled(self):
        settings = LoggingSettings(level="WARNING", file="", console=False)
        logger = setup_logging(settings)
        assert len(logger.handlers) == 0

    def test_level_applied(self):
        settings = LoggingSettings(level="debug", file="", console=False)
        logger = setup_logging(settings)
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        settings = LoggingSettings(level="chatty", file="", console=False)
        assert setup_logging(settings).level == logging.INFO

    def test_handlers_share_log_format(self, tmp_path):
        settings = LoggingSettings(level="INFO", file=str(tmp_path / "scoring.log"), console=True)
        logger = setup_logging(settings)
        assert len(logger.handlers) == 2
        assert all(h.formatter._fmt == LOG_FORMAT for h in logger.handlers)
        logger.handlers.clear()

    def test_handlers_cleared_on_each_call(self):
        settings = LoggingSettings(level="INFO", file="", console=True)
        setup_logging(settings)
        logger = setup_logging(settings)
        assert len(logger.handlers) == 1


class TestGetLogger:
    def test_returns_child_logger(self):
        logger = get_logger("analysis.scoring")
        assert logger.name == "vdjscore.analysis.scoring"


def test_empty_reference_logged_at_debug(caplog):
    from Bio.Align.substitution_matrices import Array

    from vdjscore.engine.analysis.scoring import PositionalAlignmentScoring
    from vdjscore.engine.structures.scoring import LinearGapScoring

    scoring = PositionalAlignmentScoring(LinearGapScoring(Array("AC", dims=2), -5.0), 1.0, 0.0, 0.0)
    with caplog.at_level(logging.DEBUG, logger="vdjscore"):
        assert scoring.compute_base_score("") == 0.0
    assert "Empty reference" in caplog.text
