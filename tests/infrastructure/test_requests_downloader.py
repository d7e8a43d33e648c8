from __future__ import annotations

import os
from pathlib import Path
from typing import List

import pytest
import requests

from infrastructure.http.requests_downloader import RequestsDownloader


class FakeResponse:
    def __init__(self, chunks: List[bytes], status_code: int = 200):
        self._chunks = chunks
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size: int):
        return iter(self._chunks)


class FakeSession:
    def __init__(self, response: FakeResponse):
        self.response = response
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        return self.response


def test_download_writes_executable_file(tmp_path: Path) -> None:
    downloader = RequestsDownloader(timeout_sec=5)
    session = FakeSession(FakeResponse([b"#!/bin/sh\n", b"", b"echo fetch\n"]))
    downloader._session = session
    dest = tmp_path / "tools" / "fetch"

    downloader.download("https://downloads.example.com/fetch", dest)

    assert dest.read_bytes() == b"#!/bin/sh\necho fetch\n"
    assert os.access(dest, os.X_OK)
    assert not (tmp_path / "tools" / "fetch.part").exists()
    url, kwargs = session.requests[0]
    assert url == "https://downloads.example.com/fetch"
    assert kwargs["stream"] is True
    assert kwargs["timeout"] == 5


def test_http_error_leaves_no_file(tmp_path: Path) -> None:
    downloader = RequestsDownloader()
    downloader._session = FakeSession(FakeResponse([], status_code=404))
    dest = tmp_path / "fetch"

    with pytest.raises(requests.HTTPError):
        downloader.download("https://downloads.example.com/fetch", dest)

    assert not dest.exists()
    assert not (tmp_path / "fetch.part").exists()
