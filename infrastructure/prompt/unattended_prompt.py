# infrastructure/prompt/unattended_prompt.py
from __future__ import annotations

from dataclasses import dataclass

from application.ports.logger import LoggerPort
from application.ports.operator_prompt import OperatorPromptPort
from domain.exceptions import ValidationError

POLICIES = ("abort", "continue")


@dataclass(frozen=True)
class UnattendedPrompt(OperatorPromptPort):
    """Answers every confirmation with a fixed policy; never reads the console."""

    policy: str
    logger: LoggerPort

    def __post_init__(self) -> None:
        if self.policy not in POLICIES:
            raise ValidationError(f"Unattended policy must be one of {POLICIES}, got '{self.policy}'")

    def ask(self, question: str) -> str:
        raise ValidationError(f"'{question}' must be given on the command line in unattended mode")

    def confirm(self, question: str) -> bool:
        accepted = self.policy == "continue"
        self.logger.info("prompt.unattended", question=question, policy=self.policy, accepted=accepted)
        return accepted
