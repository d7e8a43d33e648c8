from __future__ import annotations

import pytest

from domain.exceptions import ValidationError
from infrastructure.prompt.console_prompt import ConsolePrompt
from infrastructure.prompt.unattended_prompt import UnattendedPrompt
from tests.fakes import MockLogger


class TestConsolePrompt:
    def test_ask_returns_raw_answer(self):
        asked = []
        prompt = ConsolePrompt(MockLogger(), input_fn=lambda q: asked.append(q) or "2.2.0")

        assert prompt.ask("Upgrade version") == "2.2.0"
        assert asked == ["Upgrade version: "]

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES "])
    def test_confirm_accepts_yes(self, answer):
        prompt = ConsolePrompt(MockLogger(), input_fn=lambda q: answer)
        assert prompt.confirm("Continue?") is True

    @pytest.mark.parametrize("answer", ["n", "N", "", "maybe"])
    def test_confirm_rejects_everything_else(self, answer):
        prompt = ConsolePrompt(MockLogger(), input_fn=lambda q: answer)
        assert prompt.confirm("Continue?") is False

    def test_answers_are_logged(self):
        logger = MockLogger()
        prompt = ConsolePrompt(logger, input_fn=lambda q: "n")

        prompt.confirm("Backup failed. Continue anyway?")

        call = logger.calls[0]
        assert call["event"] == "prompt.confirmed"
        assert call["accepted"] is False

    def test_default_reads_builtin_input(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda q: "yes")
        assert ConsolePrompt(MockLogger()).confirm("Continue?") is True


class TestUnattendedPrompt:
    def test_continue_policy_accepts(self):
        assert UnattendedPrompt(policy="continue", logger=MockLogger()).confirm("Continue?") is True

    def test_abort_policy_declines(self):
        assert UnattendedPrompt(policy="abort", logger=MockLogger()).confirm("Continue?") is False

    def test_ask_is_not_possible(self):
        prompt = UnattendedPrompt(policy="abort", logger=MockLogger())
        with pytest.raises(ValidationError, match="command line"):
            prompt.ask("Platform")

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValidationError):
            UnattendedPrompt(policy="retry", logger=MockLogger())
