# domain/steps/filesystem.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from domain.steps.base import Step


@dataclass(frozen=True)
class EnsureDirectoryStep(Step):
    path: Path = Path(".")


@dataclass(frozen=True)
class MigrateConfigStep(Step):
    source_name: str = ""
    stale_name: str = ""
