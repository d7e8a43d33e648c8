# application/handlers/tooling_handler.py
from __future__ import annotations

import requests

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.tooling import EnsureToolStep


class EnsureToolStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, EnsureToolStep)

    def handle(self, step: EnsureToolStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if step.path.is_file():
            deps.logger.info("tool.present", step_id=step.id, path=str(step.path))
            return StepOutcome(ok=True)

        deps.logger.info("tool.downloading", step_id=step.id, url=step.url, path=str(step.path))
        try:
            deps.downloader.download(step.url, step.path)
        except (requests.RequestException, OSError) as e:
            return StepOutcome(ok=False, error_message=f"Failed to fetch {step.url}: {e}")

        deps.logger.info("tool.downloaded", step_id=step.id, path=str(step.path))
        return StepOutcome(ok=True)
