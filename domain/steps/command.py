# domain/steps/command.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class CommandStep(Step):
    """
    Run an external command.

    ``command`` and ``cwd`` are templates; placeholders such as
    ``{release_dir}`` or ``{upgrade_version}`` are filled from the run
    config when the step executes. With ``abort_on_launch_error`` a
    command that cannot be started at all halts the run at once, skipping
    retries and the failure policy.
    """
    command: List[str] = field(default_factory=list)
    cwd: Optional[str] = None
    abort_on_launch_error: bool = False
