# infrastructure/http/requests_downloader.py
from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Dict, Optional

import requests

from application.ports.downloader import DownloaderPort


class RequestsDownloader(DownloaderPort):
    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: int = 60,
        chunk_size: int = 64 * 1024,
    ):
        self._session = requests.Session()
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec
        self._chunk_size = chunk_size

    def download(self, url: str, dest: Path) -> None:
        """
        Stream ``url`` into ``dest`` and mark it executable.

        The body goes to a ``.part`` file first so an interrupted download
        never leaves a truncated file at ``dest``.
        """
        dest.parent.mkdir(parents=True, exist_ok=True)
        partial = dest.with_name(dest.name + ".part")

        try:
            with self._session.get(
                url,
                headers=self._base_headers,
                timeout=self._timeout,
                stream=True,
                allow_redirects=True,
            ) as resp:
                resp.raise_for_status()
                with partial.open("wb") as f:
                    for chunk in resp.iter_content(chunk_size=self._chunk_size):
                        if chunk:
                            f.write(chunk)
            os.replace(partial, dest)
        finally:
            if partial.exists():
                partial.unlink()

        mode = dest.stat().st_mode
        dest.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
