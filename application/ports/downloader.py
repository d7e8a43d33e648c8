# application/ports/downloader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DownloaderPort(ABC):
    @abstractmethod
    def download(self, url: str, dest: Path) -> None:
        ...
