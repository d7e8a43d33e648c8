# domain/run.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from domain.run_config import RunConfig


@dataclass
class RunContext:
    run_id: str = ""

    # set once by the parameter collection step
    config: Optional[RunConfig] = None
    state: Dict[str, Any] = field(default_factory=dict)

    def require_config(self) -> RunConfig:
        if self.config is None:
            raise RuntimeError("Run parameters have not been collected yet")
        return self.config
