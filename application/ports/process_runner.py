# application/ports/process_runner.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


class CommandExecutionError(Exception):
    """The command could not be started at all (missing binary, bad cwd, ...)."""


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        detail = (self.stderr or self.stdout).strip()
        if detail:
            return f"exit code {self.returncode}: {detail.splitlines()[-1]}"
        return f"exit code {self.returncode}"


class ProcessRunnerPort(ABC):
    @abstractmethod
    def run(self, command: List[str], cwd: Optional[Path] = None) -> ProcessResult:
        """
        Run ``command`` to completion and report its exit status.

        Raises CommandExecutionError when the process cannot be launched.
        """
        ...
