# domain/steps/tooling.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from domain.steps.base import Step


@dataclass(frozen=True)
class EnsureToolStep(Step):
    url: str = ""
    path: Path = Path(".")
