# application/handlers/filesystem_handler.py
from __future__ import annotations

import shutil

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.filesystem import EnsureDirectoryStep, MigrateConfigStep


class EnsureDirectoryStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, EnsureDirectoryStep)

    def handle(self, step: EnsureDirectoryStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if step.path.is_dir():
            deps.logger.info("directory.present", step_id=step.id, path=str(step.path))
            return StepOutcome(ok=True)
        try:
            step.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return StepOutcome(ok=False, error_message=f"Cannot create {step.path}: {e}")
        deps.logger.info("directory.created", step_id=step.id, path=str(step.path))
        return StepOutcome(ok=True)


class MigrateConfigStepHandler(StepHandler):
    """
    Carry the local config file of the running release into the new one.

    A config file of the new name (``stale_name``) left in the new release
    is removed first. The source is then copied byte for byte under its own
    name into the new release's config directory.
    """

    def supports(self, step) -> bool:
        return isinstance(step, MigrateConfigStep)

    def handle(self, step: MigrateConfigStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        config = ctx.require_config()
        source = config.paths.current_config_dir / step.source_name
        stale = config.paths.upgrade_config_dir / step.stale_name
        target = config.paths.upgrade_config_dir / step.source_name

        if stale.exists():
            try:
                stale.unlink()
            except OSError as e:
                return StepOutcome(ok=False, error_message=f"Cannot remove existing {stale}: {e}")
            deps.logger.info("config.removed_stale", step_id=step.id, path=str(stale))

        if not source.is_file():
            return StepOutcome(ok=False, error_message=f"Source config not found: {source}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            return StepOutcome(ok=False, error_message=f"Cannot copy {source} to {target}: {e}")

        deps.logger.info("config.copied", step_id=step.id, source=str(source), target=str(target))
        return StepOutcome(ok=True)
