# application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from application.outcome import StepOutcome
from application.ports.process_runner import CommandExecutionError
from domain.steps.base import Step

if TYPE_CHECKING:
    from pathlib import Path

    from domain.run import RunContext
    from application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    @abstractmethod
    def supports(self, step: Step) -> bool: ...

    @abstractmethod
    def handle(self, step: Step, ctx: "RunContext", deps: "ExecutionDeps") -> StepOutcome: ...


def run_command(
    deps: "ExecutionDeps",
    step_id: str,
    command: List[str],
    cwd: Optional["Path"] = None,
    abort_on_launch_error: bool = False,
) -> StepOutcome:
    """
    Run one external command and map its exit status onto a StepOutcome.

    A command that cannot be launched is an ordinary failure, left to the
    step's failure policy. With ``abort_on_launch_error`` it yields
    ``abort=True`` instead, so neither retries nor an operator prompt follow.
    """
    deps.logger.info("command.run", step_id=step_id, command=" ".join(command), cwd=str(cwd) if cwd else None)
    try:
        result = deps.runner.run(command, cwd=cwd)
    except CommandExecutionError as e:
        deps.logger.error("command.not_executed", step_id=step_id, error=str(e))
        return StepOutcome(ok=False, error_message=str(e), abort=abort_on_launch_error)

    if not result.ok:
        message = f"'{' '.join(command)}' failed with {result.describe()}"
        deps.logger.error("command.failed", step_id=step_id, returncode=result.returncode)
        return StepOutcome(ok=False, error_message=message)
    return StepOutcome(ok=True)
