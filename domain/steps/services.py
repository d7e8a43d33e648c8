# domain/steps/services.py
from __future__ import annotations

from dataclasses import dataclass

from domain.steps.base import Step


@dataclass(frozen=True)
class StopServicesStep(Step):
    process_manager: str = "pm2"


@dataclass(frozen=True)
class StartServicesStep(Step):
    process_manager: str = "pm2"
