# application/handlers/command_handler.py
from __future__ import annotations

from pathlib import Path

from application.handlers.base import StepHandler, run_command
from application.outcome import StepOutcome
from application.services.command_renderer import CommandRenderer
from application.services.execution_deps import ExecutionDeps
from domain.exceptions import ValidationError
from domain.run import RunContext
from domain.steps.command import CommandStep


class CommandStepHandler(StepHandler):
    def __init__(self, renderer: CommandRenderer):
        self._renderer = renderer

    def supports(self, step) -> bool:
        return isinstance(step, CommandStep)

    def handle(self, step: CommandStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if not step.command:
            return StepOutcome(ok=False, error_message=f"No command configured for {step.id}")
        try:
            command = self._renderer.render_args(step.command, ctx)
            cwd = Path(self._renderer.render(step.cwd, ctx)) if step.cwd else None
        except ValidationError as e:
            return StepOutcome(ok=False, error_message=str(e))

        return run_command(
            deps,
            step.id,
            command,
            cwd=cwd,
            abort_on_launch_error=step.abort_on_launch_error,
        )
