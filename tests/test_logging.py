"""Tests for the logging bootstrap."""

import json
import logging

import pytest

from dialogbridge.configs.system import LoggingConfig
from dialogbridge.infra.logging import get_transcript_logger, setup_logging


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    transcript = get_transcript_logger()
    saved_handlers, saved_level = list(root.handlers), root.level
    saved_transcript_level = transcript.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    transcript.setLevel(saved_transcript_level)


class TestSetupLogging:
    def test_json_lines(self, capsys, restore_logging):
        setup_logging(LoggingConfig(level="INFO", json_output=True))
        logging.getLogger("dialogbridge.test").info("turn fulfilled")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "turn fulfilled"
        assert record["level"] == "INFO"
        assert record["logger"] == "dialogbridge.test"
        assert record["trace_id"] == ""
        assert record["service"] == "dialogbridge"

    def test_level_gates_debug(self, capsys, restore_logging):
        setup_logging(LoggingConfig(level="INFO", json_output=True))
        logging.getLogger("dialogbridge.test").debug("transcript")
        assert "transcript" not in capsys.readouterr().out

    def test_dev_format(self, capsys, restore_logging):
        setup_logging(LoggingConfig(level="DEBUG", json_output=False))
        logging.getLogger("dialogbridge.test").debug("plain text")
        assert "plain text" in capsys.readouterr().out

    def test_transcripts_off_even_at_debug(self, capsys, restore_logging):
        setup_logging(LoggingConfig(level="DEBUG", log_transcripts=False))
        get_transcript_logger().debug("user said: card pin")
        logging.getLogger("dialogbridge.test").debug("other debug")

        out = capsys.readouterr().out
        assert "card pin" not in out
        assert "other debug" in out

    def test_transcripts_on_at_info(self, capsys, restore_logging):
        setup_logging(LoggingConfig(level="INFO", log_transcripts=True))
        get_transcript_logger().debug("user said: balance")
        logging.getLogger("dialogbridge.test").debug("other debug")

        out = capsys.readouterr().out
        assert "balance" in out
        assert "other debug" not in out

    def test_quiet_loggers_capped_at_warning(self, restore_logging):
        setup_logging(LoggingConfig(level="DEBUG", quiet_loggers=["chatter"]))
        assert logging.getLogger("chatter").getEffectiveLevel() == logging.WARNING
