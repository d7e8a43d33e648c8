# application/ports/operator_prompt.py
from __future__ import annotations

from abc import ABC, abstractmethod


class OperatorPromptPort(ABC):
    @abstractmethod
    def ask(self, question: str) -> str:
        """Ask a free-text question and return the raw answer."""
        ...

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask a yes/no question; True means proceed."""
        ...
