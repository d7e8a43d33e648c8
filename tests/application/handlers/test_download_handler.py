from __future__ import annotations

from pathlib import Path

from application.handlers.download_handler import DownloadArtifactStepHandler
from application.ports.process_runner import CommandExecutionError
from application.services.command_renderer import CommandRenderer
from domain.run import RunContext
from domain.run_config import Platform, RunConfig
from domain.steps.download import DownloadArtifactStep
from tests.fakes import FakeRunner, make_deps, make_settings


def _handler_and_ctx(tmp_path: Path):
    settings = make_settings(tmp_path)
    handler = DownloadArtifactStepHandler(settings, CommandRenderer(settings))
    ctx = RunContext(config=RunConfig.create(Platform.CENTRAL, "2.1.0", "2.2.0", settings))
    return settings, handler, ctx


def test_invokes_download_tool_with_rendered_args(tmp_path: Path) -> None:
    settings, handler, ctx = _handler_and_ctx(tmp_path)
    runner = FakeRunner()
    step = DownloadArtifactStep(
        id="download-web",
        name="Download web",
        artifact="web",
        args=["--repo={repo}", "--tag=v{version}", "--release-asset=web-v{version}.tar.gz", "{dest}"],
        dest="{release_dir}/web",
    )

    outcome = handler.handle(step, ctx, make_deps(runner=runner))

    dest = settings.releases_dir / "2.2.0" / "web"
    assert outcome.ok is True
    assert runner.calls == [(
        [
            str(settings.download_tool_path),
            "--repo=https://github.com/example-org/platform",
            "--tag=v2.2.0",
            "--release-asset=web-v2.2.0.tar.gz",
            str(dest),
        ],
        None,
    )]
    assert dest.is_dir()


def test_tool_failure_is_reported(tmp_path: Path) -> None:
    _, handler, ctx = _handler_and_ctx(tmp_path)
    runner = FakeRunner().fail_on("--ref=v2.2.0", stderr="release not found")
    step = DownloadArtifactStep(
        id="download-release",
        name="Download release",
        artifact="release",
        args=["--ref=v{version}", "{dest}"],
        dest="{release_dir}",
    )

    outcome = handler.handle(step, ctx, make_deps(runner=runner))

    assert outcome.ok is False
    assert "release not found" in outcome.error_message


def test_missing_tool_binary_fails(tmp_path: Path) -> None:
    _, handler, ctx = _handler_and_ctx(tmp_path)
    runner = FakeRunner().raise_on("fetch", CommandExecutionError("No such file"))
    step = DownloadArtifactStep(id="download-release", name="Download", args=["{dest}"], dest="{release_dir}")

    outcome = handler.handle(step, ctx, make_deps(runner=runner))

    assert outcome.ok is False
    assert outcome.abort is False
    assert outcome.error_message == "No such file"


def test_unknown_placeholder_fails_without_running(tmp_path: Path) -> None:
    _, handler, ctx = _handler_and_ctx(tmp_path)
    runner = FakeRunner()
    step = DownloadArtifactStep(id="download-release", name="Download", args=["{nope}"], dest="{release_dir}")

    outcome = handler.handle(step, ctx, make_deps(runner=runner))

    assert outcome.ok is False
    assert "Unknown placeholder" in outcome.error_message
    assert runner.calls == []
