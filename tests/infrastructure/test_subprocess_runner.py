from __future__ import annotations

import sys
from pathlib import Path

import pytest

from application.ports.process_runner import CommandExecutionError
from infrastructure.process.subprocess_runner import SubprocessRunner
from tests.fakes import MockLogger


def test_successful_command_output_is_logged() -> None:
    logger = MockLogger()
    runner = SubprocessRunner(logger)

    result = runner.run([sys.executable, "-c", "print('migrated 4 tables')"])

    assert result.ok is True
    assert result.returncode == 0
    assert "migrated 4 tables" in result.stdout
    lines = [c["line"] for c in logger.calls if c["event"] == "command.output"]
    assert lines == ["migrated 4 tables"]


def test_non_zero_exit_is_reported() -> None:
    runner = SubprocessRunner(MockLogger())

    result = runner.run([sys.executable, "-c", "import sys; sys.stderr.write('disk full\\n'); sys.exit(3)"])

    assert result.ok is False
    assert result.returncode == 3
    assert result.describe() == "exit code 3: disk full"


def test_runs_in_given_directory(tmp_path: Path) -> None:
    runner = SubprocessRunner(MockLogger())

    result = runner.run([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)

    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()


def test_missing_binary_raises(tmp_path: Path) -> None:
    runner = SubprocessRunner(MockLogger())

    with pytest.raises(CommandExecutionError, match="Cannot execute"):
        runner.run([str(tmp_path / "no-such-binary")])


def test_missing_cwd_raises(tmp_path: Path) -> None:
    runner = SubprocessRunner(MockLogger())

    with pytest.raises(CommandExecutionError):
        runner.run([sys.executable, "-c", "pass"], cwd=tmp_path / "missing")
