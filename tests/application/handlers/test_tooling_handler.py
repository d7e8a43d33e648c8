from __future__ import annotations

from pathlib import Path

import requests

from application.handlers.tooling_handler import EnsureToolStepHandler
from domain.run import RunContext
from domain.steps.tooling import EnsureToolStep
from tests.fakes import FakeDownloader, make_deps


def _step(path: Path) -> EnsureToolStep:
    return EnsureToolStep(
        id="ensure-download-tool",
        name="Ensure download tool",
        url="https://downloads.example.com/fetch",
        path=path,
    )


def test_downloads_missing_tool(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    tool = tmp_path / "fetch"

    outcome = EnsureToolStepHandler().handle(_step(tool), RunContext(), make_deps(downloader=downloader))

    assert outcome.ok is True
    assert downloader.calls == [("https://downloads.example.com/fetch", tool)]
    assert tool.is_file()


def test_second_run_skips_download(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    tool = tmp_path / "fetch"
    handler = EnsureToolStepHandler()
    deps = make_deps(downloader=downloader)

    handler.handle(_step(tool), RunContext(), deps)
    outcome = handler.handle(_step(tool), RunContext(), deps)

    assert outcome.ok is True
    assert len(downloader.calls) == 1


def test_download_error_is_failure(tmp_path: Path) -> None:
    downloader = FakeDownloader(error=requests.ConnectionError("network unreachable"))

    outcome = EnsureToolStepHandler().handle(
        _step(tmp_path / "fetch"), RunContext(), make_deps(downloader=downloader)
    )

    assert outcome.ok is False
    assert "network unreachable" in outcome.error_message
    assert outcome.abort is False
