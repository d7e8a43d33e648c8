# application/services/execution_error_builder.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from application.executor.step_executor import ExecutionResult
from domain.run import RunContext


@dataclass(frozen=True)
class ExecutionErrorDetail:
    code: str
    message: str
    step_id: Optional[str]
    upgrade_version: Optional[str]


class ExecutionErrorBuilder:
    def build_from_result(self, result: ExecutionResult, ctx: RunContext | None) -> ExecutionErrorDetail:
        message = result.error_message or "Step execution failed"
        return ExecutionErrorDetail(
            code="step_failed",
            message=message,
            step_id=result.failed_step_id,
            upgrade_version=self._upgrade_version(ctx),
        )

    def build_from_exception(self, message: str, ctx: RunContext | None) -> ExecutionErrorDetail:
        return ExecutionErrorDetail(
            code="exception",
            message=message,
            step_id=None,
            upgrade_version=self._upgrade_version(ctx),
        )

    def _upgrade_version(self, ctx: RunContext | None) -> Optional[str]:
        config = getattr(ctx, "config", None)
        return getattr(config, "upgrade_version", None)
