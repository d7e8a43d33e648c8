# application/handlers/download_handler.py
from __future__ import annotations

from pathlib import Path

from application.handlers.base import StepHandler, run_command
from application.outcome import StepOutcome
from application.services.command_renderer import CommandRenderer
from application.services.execution_deps import ExecutionDeps
from domain.exceptions import ValidationError
from domain.run import RunContext
from domain.settings import UpgradeSettings
from domain.steps.download import DownloadArtifactStep


class DownloadArtifactStepHandler(StepHandler):
    def __init__(self, settings: UpgradeSettings, renderer: CommandRenderer):
        self._tool = settings.download_tool_path
        self._renderer = renderer

    def supports(self, step) -> bool:
        return isinstance(step, DownloadArtifactStep)

    def handle(self, step: DownloadArtifactStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        config = ctx.require_config()
        try:
            dest = Path(self._renderer.render(step.dest, ctx))
            args = self._renderer.render_args(step.args, ctx, dest=str(dest))
        except ValidationError as e:
            return StepOutcome(ok=False, error_message=str(e))

        deps.logger.info(
            "artifact.download",
            step_id=step.id,
            artifact=step.artifact,
            version=config.upgrade_version,
            dest=str(dest),
        )
        # the tool writes into dest; it must exist beforehand
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return StepOutcome(ok=False, error_message=f"Cannot create {dest}: {e}")

        return run_command(deps, step.id, [str(self._tool), *args])
