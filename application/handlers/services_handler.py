# application/handlers/services_handler.py
from __future__ import annotations

import json
from typing import Any, List, Optional

from application.handlers.base import StepHandler, run_command
from application.outcome import StepOutcome
from application.ports.process_runner import CommandExecutionError
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.services import StartServicesStep, StopServicesStep


def parse_online_services(raw: str) -> List[str]:
    """
    Names of processes reported ``online`` by ``pm2 jlist``.

    pm2 may print notices ahead of the JSON array, some of them starting
    with ``[PM2]`` themselves (daemon spawn). Decoding is tried at every
    ``[`` until one yields a list.
    """
    data = _find_json_array(raw)
    if data is None:
        if raw.strip():
            raise ValueError("process list is not a JSON array")
        return []

    online: List[str] = []
    for proc in data:
        if not isinstance(proc, dict):
            continue
        env = proc.get("pm2_env") or {}
        if env.get("status") == "online":
            online.append(str(proc.get("name", "?")))
    return online


def _find_json_array(raw: str) -> Optional[List[Any]]:
    decoder = json.JSONDecoder()
    start = raw.find("[")
    while start >= 0:
        try:
            data, _ = decoder.raw_decode(raw, start)
        except ValueError:
            data = None
        if isinstance(data, list):
            return data
        start = raw.find("[", start + 1)
    return None


class StopServicesStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, StopServicesStep)

    def handle(self, step: StopServicesStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        pm = step.process_manager
        try:
            status = deps.runner.run([pm, "jlist"])
        except CommandExecutionError as e:
            deps.logger.error("command.not_executed", step_id=step.id, error=str(e))
            return StepOutcome(ok=False, error_message=str(e))
        if not status.ok:
            return StepOutcome(ok=False, error_message=f"'{pm} jlist' failed with {status.describe()}")

        try:
            online = parse_online_services(status.stdout)
        except ValueError as e:
            return StepOutcome(ok=False, error_message=f"Cannot read {pm} process list: {e}")

        if not online:
            deps.logger.info("services.none_online", step_id=step.id)
            return StepOutcome(ok=True)

        deps.logger.info("services.online", step_id=step.id, services=online)
        outcome = run_command(deps, step.id, [pm, "delete", "all"])
        if not outcome.ok:
            return outcome
        outcome = run_command(deps, step.id, [pm, "save", "--force"])
        if not outcome.ok:
            return outcome

        ctx.state["services_stopped"] = online
        return StepOutcome(ok=True)


class StartServicesStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, StartServicesStep)

    def handle(self, step: StartServicesStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        config = ctx.require_config()
        pm = step.process_manager
        release_dir = config.paths.upgrade_release_dir

        outcome = run_command(
            deps,
            step.id,
            [pm, "start", str(config.paths.process_config_file)],
            cwd=release_dir,
        )
        if not outcome.ok:
            return outcome
        outcome = run_command(deps, step.id, [pm, "save"], cwd=release_dir)
        if not outcome.ok:
            return outcome

        deps.logger.info("services.started", step_id=step.id, version=config.upgrade_version)
        return StepOutcome(ok=True)
