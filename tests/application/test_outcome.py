# tests/application/test_outcome.py
import pytest
from application.outcome import StepOutcome


class TestStepOutcome:
    def test_create_success_outcome(self):
        outcome = StepOutcome(ok=True)
        assert outcome.ok is True
        assert outcome.error_message is None
        assert outcome.abort is False

    def test_create_failure_outcome_with_error(self):
        outcome = StepOutcome(ok=False, error_message="exit code 1")
        assert outcome.ok is False
        assert outcome.error_message == "exit code 1"
        assert outcome.abort is False

    def test_create_aborting_failure(self):
        outcome = StepOutcome(ok=False, error_message="no such file", abort=True)
        assert outcome.abort is True

    def test_outcome_frozen(self):
        outcome = StepOutcome(ok=True)
        with pytest.raises(Exception):  # FrozenInstanceError
            outcome.ok = False
