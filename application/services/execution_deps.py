# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.downloader import DownloaderPort
from application.ports.logger import LoggerPort
from application.ports.operator_prompt import OperatorPromptPort
from application.ports.process_runner import ProcessRunnerPort


@dataclass(frozen=True)
class ExecutionDeps:
    runner: ProcessRunnerPort
    downloader: DownloaderPort
    prompt: OperatorPromptPort
    logger: LoggerPort

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
