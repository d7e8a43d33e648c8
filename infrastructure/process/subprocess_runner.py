# infrastructure/process/subprocess_runner.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from application.ports.logger import LoggerPort
from application.ports.process_runner import (
    CommandExecutionError,
    ProcessResult,
    ProcessRunnerPort,
)


class SubprocessRunner(ProcessRunnerPort):
    """Blocking runner; waits for every command to exit, no timeout."""

    def __init__(self, logger: LoggerPort):
        self._logger = logger

    def run(self, command: List[str], cwd: Optional[Path] = None) -> ProcessResult:
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise CommandExecutionError(f"Cannot execute '{' '.join(command)}': {e}") from e

        self._log_output(command[0], "stdout", completed.stdout)
        self._log_output(command[0], "stderr", completed.stderr)

        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def _log_output(self, program: str, stream: str, text: Optional[str]) -> None:
        for line in (text or "").splitlines():
            if line.strip():
                self._logger.info("command.output", program=program, stream=stream, line=line)
