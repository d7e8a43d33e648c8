# application/executor/step_executor.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import time
import uuid

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.base import FailurePolicy, RetryPolicy, Step


@dataclass(frozen=True)
class ExecutionResult:
    ok: bool
    failed_step_id: Optional[str] = None
    error_message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


class StepExecutor:
    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, steps: List[Step], ctx: RunContext, deps: ExecutionDeps) -> ExecutionResult:
        if not getattr(ctx, "run_id", ""):
            ctx.run_id = uuid.uuid4().hex

        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))
        warnings: List[str] = []

        # strictly in declaration order; a step starts only after the
        # previous outcome (and any operator decision) is resolved
        for step in steps:
            if getattr(step, "enabled", True) is False:
                deps.logger.info("step.skipped", step_id=step.id)
                continue

            outcome = self._execute_step_with_retry(step, ctx, deps)

            if outcome.ok:
                continue

            if outcome.abort:
                deps.logger.error("step.aborted", step_id=step.id, error=outcome.error_message)
                return ExecutionResult(
                    ok=False,
                    failed_step_id=step.id,
                    error_message=outcome.error_message,
                    warnings=warnings,
                )

            action = self._resolve_failure_action(step, outcome, deps)

            if action == "continue":
                warnings.append(f"{step.id}: {outcome.error_message}")
                continue

            deps.logger.error("step.fatal", step_id=step.id, error=outcome.error_message)
            return ExecutionResult(
                ok=False,
                failed_step_id=step.id,
                error_message=outcome.error_message,
                warnings=warnings,
            )

        return ExecutionResult(ok=True, warnings=warnings)

    def _execute_step_with_retry(self, step: Step, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        handler = self._registry.get_handler(step)
        retry_policy: RetryPolicy = getattr(step, "retry", None) or RetryPolicy()

        max_attempts = retry_policy.max + 1  # max=2 => 3 attempts in total
        backoff_sec = retry_policy.backoff_sec or []

        for attempt in range(max_attempts):
            if attempt > 0:
                wait_sec = backoff_sec[attempt - 1] if (attempt - 1) < len(backoff_sec) else 0
                deps.logger.info(
                    "step.retry",
                    step_id=step.id,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    wait_sec=wait_sec,
                )
                if wait_sec:
                    time.sleep(wait_sec)

            deps.logger.info(
                "step.start",
                step_id=step.id,
                step_name=step.name,
                attempt=attempt + 1,
            )
            t0 = time.perf_counter()

            outcome: StepOutcome = handler.handle(step, ctx, deps)

            if outcome is None:
                raise RuntimeError(
                    f"Handler returned None: handler={type(handler).__name__}, step={step.id} ({type(step).__name__})"
                )

            deps.logger.info(
                "step.end",
                step_id=step.id,
                ok=outcome.ok,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
                attempt=attempt + 1,
            )

            if outcome.ok or outcome.abort:
                return outcome

        if max_attempts > 1:
            deps.logger.warning(
                "step.retries_exhausted",
                step_id=step.id,
                attempts=max_attempts,
                error=outcome.error_message,
            )
        return outcome

    def _resolve_failure_action(self, step: Step, outcome: StepOutcome, deps: ExecutionDeps) -> str:
        """
        Apply the step's failure policy.
        Returns "abort" | "continue".
        """
        policy = getattr(step, "on_failure", FailurePolicy.FATAL)

        if policy == FailurePolicy.WARN_CONTINUE:
            deps.logger.warning("step.failed_continuing", step_id=step.id, error=outcome.error_message)
            return "continue"

        if policy == FailurePolicy.PROMPT_CONTINUE:
            question = f"{step.name} failed ({outcome.error_message}). Continue anyway?"
            if deps.prompt.confirm(question):
                deps.logger.warning("step.forced_continue", step_id=step.id, error=outcome.error_message)
                return "continue"
            deps.logger.info("step.operator_declined", step_id=step.id)
            return "abort"

        return "abort"
