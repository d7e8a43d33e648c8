# domain/steps/download.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class DownloadArtifactStep(Step):
    artifact: str = ""
    args: List[str] = field(default_factory=list)
    dest: str = ""
