# application/handlers/parameters_handler.py
from __future__ import annotations

from typing import Optional

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.exceptions import ValidationError
from domain.run import RunContext
from domain.run_config import Platform, RunConfig
from domain.settings import UpgradeSettings
from domain.steps.parameters import CollectParametersStep


class CollectParametersStepHandler(StepHandler):
    """
    Ask for the platform and both versions.

    Answers are accepted as typed. An unrecognised platform is only
    logged; a wrong value makes the download or config copy fail later.
    """

    def __init__(self, settings: UpgradeSettings):
        self._settings = settings

    def supports(self, step) -> bool:
        return isinstance(step, CollectParametersStep)

    def handle(self, step: CollectParametersStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if ctx.config is not None:
            deps.logger.info("parameters.already_set", step_id=step.id)
            return StepOutcome(ok=True)

        try:
            platform = self._value_or_ask(step.platform, "Platform (central/facility)", deps)
            current_version = self._value_or_ask(step.current_version, "Current version", deps)
            upgrade_version = self._value_or_ask(step.upgrade_version, "Upgrade version", deps)
        except ValidationError as e:
            return StepOutcome(ok=False, error_message=str(e))

        if Platform.lookup(platform) is None:
            deps.logger.warning("parameters.unknown_platform", step_id=step.id, platform=platform)

        ctx.config = RunConfig.create(
            platform=platform,
            current_version=current_version,
            upgrade_version=upgrade_version,
            settings=self._settings,
        )
        deps.logger.info(
            "parameters.collected",
            step_id=step.id,
            platform=ctx.config.platform,
            current_version=current_version,
            upgrade_version=upgrade_version,
        )
        return StepOutcome(ok=True)

    def _value_or_ask(self, preset: Optional[str], question: str, deps: ExecutionDeps) -> str:
        if preset is not None:
            return preset
        return deps.prompt.ask(question).strip()
