# infrastructure/prompt/console_prompt.py
from __future__ import annotations

from typing import Callable, Optional

from application.ports.logger import LoggerPort
from application.ports.operator_prompt import OperatorPromptPort

YES_ANSWERS = {"y", "yes"}


class ConsolePrompt(OperatorPromptPort):
    """Interactive prompt; blocks until the operator answers."""

    def __init__(self, logger: LoggerPort, input_fn: Optional[Callable[[str], str]] = None):
        self._logger = logger
        self._input_fn = input_fn

    def ask(self, question: str) -> str:
        answer = self._read(f"{question}: ")
        self._logger.info("prompt.answered", question=question, answer=answer)
        return answer

    def confirm(self, question: str) -> bool:
        answer = self._read(f"{question} [y/N]: ")
        accepted = answer.strip().lower() in YES_ANSWERS
        self._logger.info("prompt.confirmed", question=question, answer=answer, accepted=accepted)
        return accepted

    def _read(self, text: str) -> str:
        if self._input_fn is not None:
            return self._input_fn(text)
        return input(text)
