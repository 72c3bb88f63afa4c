"""Tests for ReminderData operation decorators."""
import pytest
from unittest.mock import MagicMock

from reminder.core.logging_manager import ReminderLogger
from reminder.database.decorators import log_operation, persists
from reminder.models import Outcome


class Recorder:
    """Minimal object exposing the attributes the decorators rely on."""

    def __init__(self, logger=None):
        self.logger = logger
        self.persist_calls = 0

    def persist(self):
        self.persist_calls += 1

    @log_operation("do_work")
    @persists
    def apply(self, outcome):
        return outcome

    @log_operation("do_work")
    @persists
    def fail(self):
        raise ValueError("bad input")


class TestLogOperation:
    """Tests for log_operation."""

    def test_logs_completion_with_outcome(self):
        mock_logger = MagicMock(spec=ReminderLogger)
        Recorder(mock_logger).apply(Outcome.APPLIED)

        name, details = mock_logger.log_operation.call_args[0]
        assert name == "do_work_completed"
        assert details["outcome"] == "applied"

    def test_logs_and_reraises_errors(self):
        mock_logger = MagicMock(spec=ReminderLogger)
        with pytest.raises(ValueError):
            Recorder(mock_logger).fail()

        mock_logger.log_error.assert_called_once()
        assert mock_logger.log_error.call_args[0][1]["operation"] == "do_work"
        mock_logger.log_operation.assert_not_called()

    def test_works_without_logger(self):
        assert Recorder().apply("value") == "value"


class TestPersists:
    """Tests for persists."""

    def test_persists_after_success(self):
        recorder = Recorder()
        recorder.apply(Outcome.APPLIED)
        assert recorder.persist_calls == 1

    def test_skipped_not_persisted(self):
        recorder = Recorder()
        recorder.apply(Outcome.SKIPPED)
        assert recorder.persist_calls == 0

    def test_cancelled_not_persisted(self):
        """Only an Outcome that changed something is written."""
        recorder = Recorder()
        recorder.apply(Outcome.CANCELLED)
        assert recorder.persist_calls == 0

    def test_returned_entity_persisted(self):
        recorder = Recorder()
        recorder.apply("new note")
        assert recorder.persist_calls == 1

    def test_failure_not_persisted(self):
        recorder = Recorder()
        with pytest.raises(ValueError):
            recorder.fail()
        assert recorder.persist_calls == 0
