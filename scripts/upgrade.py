#!/usr/bin/env python3
"""
Platform upgrade script

Usage:
  python scripts/upgrade.py run [--config <yaml>] [--platform <central|facility>]
                                [--current-version <v>] [--upgrade-version <v>]
                                [--unattended abort|continue] [--log-file <path>]
  python scripts/upgrade.py plan [--config <yaml>]

Examples:
  python scripts/upgrade.py run
  python scripts/upgrade.py run --config upgrade.yaml --platform facility --current-version 2.1.0 --upgrade-version 2.2.0
  python scripts/upgrade.py run --platform central --current-version 2.1.0 --upgrade-version 2.2.0 --unattended abort
  python scripts/upgrade.py plan --config upgrade.yaml
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from infrastructure.logging.log_setup import echo, setup_console_logging, setup_session_logging

from application.executor.step_executor import StepExecutor
from application.ports.operator_prompt import OperatorPromptPort
from application.services.execution_deps import ExecutionDeps
from application.services.execution_error_builder import ExecutionErrorBuilder
from application.services.upgrade_plan import (
    UpgradeParameters,
    build_handler_registry,
    build_upgrade_steps,
)
from domain.run import RunContext
from domain.settings import UpgradeSettings
from domain.steps.base import Step
from infrastructure.config.env_overrides import EnvSettingsOverrides
from infrastructure.config.yaml_settings_loader import SettingsLoadError, YamlSettingsLoader
from infrastructure.http.requests_downloader import RequestsDownloader
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.process.subprocess_runner import SubprocessRunner
from infrastructure.prompt.console_prompt import ConsolePrompt
from infrastructure.prompt.unattended_prompt import POLICIES, UnattendedPrompt


class UpgradeArgumentParser(argparse.ArgumentParser):
    """Bad arguments exit with 1 like every other failed run."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = UpgradeArgumentParser(description="Upgrade a platform installation to a new release")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run the upgrade")
    run_parser.add_argument("--config", type=str)
    run_parser.add_argument("--platform", type=str)
    run_parser.add_argument("--current-version", type=str)
    run_parser.add_argument("--upgrade-version", type=str)
    run_parser.add_argument("--unattended", type=str, choices=list(POLICIES))
    run_parser.add_argument("--log-file", type=str)
    run_parser.add_argument("--log-level", type=str, default="INFO")

    plan_parser = subparsers.add_parser("plan", help="List the upgrade steps without running them")
    plan_parser.add_argument("--config", type=str)

    return parser


def _load_settings(args: argparse.Namespace) -> UpgradeSettings:
    if args.config:
        settings = YamlSettingsLoader().load_from_file(args.config)
    else:
        settings = UpgradeSettings()
    settings = EnvSettingsOverrides().apply(settings)
    if getattr(args, "log_file", None):
        settings = replace(settings, log_file=Path(args.log_file))
    return settings


def _print_plan(steps: List[Step]) -> None:
    for index, step in enumerate(steps, start=1):
        attempts = step.retry.max + 1
        retry = f" (up to {attempts} attempts)" if attempts > 1 else ""
        print(f"{index:>2}. {step.id:<22} {step.name}  [{step.on_failure.value}]{retry}")


def _plan(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    _print_plan(build_upgrade_steps(settings))
    return 0


def _run_upgrade(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    setup_session_logging(level=args.log_level.upper(), log_file=settings.session_log_file)

    logger = LoguruLogger()
    logger.info(
        "session.start",
        argv=" ".join(sys.argv),
        cwd=str(Path.cwd()),
        log_file=str(settings.session_log_file),
    )

    prompt: OperatorPromptPort
    if args.unattended:
        prompt = UnattendedPrompt(policy=args.unattended, logger=logger)
    else:
        prompt = ConsolePrompt(logger)

    deps = ExecutionDeps(
        runner=SubprocessRunner(logger),
        downloader=RequestsDownloader(),
        prompt=prompt,
        logger=logger,
    )

    params = UpgradeParameters(
        platform=args.platform,
        current_version=args.current_version,
        upgrade_version=args.upgrade_version,
    )
    steps = build_upgrade_steps(settings, params)
    registry = build_handler_registry(settings)
    registry.ensure_supported(steps)
    executor = StepExecutor(registry)

    ctx = RunContext()
    errors = ExecutionErrorBuilder()

    echo()
    echo("=== Upgrading ===")
    echo()
    try:
        result = executor.execute(steps, ctx, deps)
    except Exception as e:
        detail = errors.build_from_exception(f"{type(e).__name__}: {e}", ctx)
        echo(f"ERROR: {detail.message}")
        logger.error("session.crashed", code=detail.code, error=detail.message)
        return 1

    echo()
    echo("=== Result ===")
    echo(f"Run ID: {ctx.run_id}")
    echo(f"Success: {result.ok}")
    for warning in result.warnings:
        echo(f"Warning: {warning}")

    if not result.ok:
        detail = errors.build_from_result(result, ctx)
        echo(f"Failed Step: {detail.step_id}")
        echo(f"Error: {detail.message}")
        logger.error(
            "session.failed",
            code=detail.code,
            step_id=detail.step_id,
            upgrade_version=detail.upgrade_version,
            error=detail.message,
        )
        return 1

    logger.info(
        "session.completed",
        upgrade_version=ctx.config.upgrade_version if ctx.config else None,
        warnings=len(result.warnings),
    )
    return 0


def main() -> None:
    setup_console_logging(level="INFO")
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:])

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "run":
            exit_code = _run_upgrade(args)
        elif args.command == "plan":
            exit_code = _plan(args)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except (ValueError, SettingsLoadError) as exc:
        # ValidationError is a ValueError
        echo(f"ERROR: {exc}")
        sys.exit(1)
    except OSError as exc:
        echo(f"ERROR: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        echo()
        echo("Aborted by operator")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
