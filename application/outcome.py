# application/outcome.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class StepOutcome:
    ok: bool
    error_message: Optional[str] = None
    # halt now, skipping retries and the step's failure policy
    abort: bool = False
