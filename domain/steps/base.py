# domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class FailurePolicy(str, Enum):
    FATAL = "fatal"
    PROMPT_CONTINUE = "prompt_continue"
    WARN_CONTINUE = "warn_continue"


@dataclass(frozen=True)
class RetryPolicy:
    max: int = 0
    backoff_sec: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class Step:
    id: str
    name: str
    enabled: bool = field(default=True, kw_only=True)
    on_failure: FailurePolicy = field(default=FailurePolicy.FATAL, kw_only=True)
    retry: RetryPolicy = field(default_factory=RetryPolicy, kw_only=True)
