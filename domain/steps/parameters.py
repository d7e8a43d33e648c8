# domain/steps/parameters.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class CollectParametersStep(Step):
    # values given up front are not asked again
    platform: Optional[str] = None
    current_version: Optional[str] = None
    upgrade_version: Optional[str] = None
