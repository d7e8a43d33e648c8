# application/services/upgrade_plan.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from application.executor.handler_registry import HandlerRegistry
from application.handlers.command_handler import CommandStepHandler
from application.handlers.download_handler import DownloadArtifactStepHandler
from application.handlers.filesystem_handler import (
    EnsureDirectoryStepHandler,
    MigrateConfigStepHandler,
)
from application.handlers.parameters_handler import CollectParametersStepHandler
from application.handlers.services_handler import (
    StartServicesStepHandler,
    StopServicesStepHandler,
)
from application.handlers.tooling_handler import EnsureToolStepHandler
from application.services.command_renderer import CommandRenderer
from domain.settings import UpgradeSettings
from domain.steps import (
    CollectParametersStep,
    CommandStep,
    DownloadArtifactStep,
    EnsureDirectoryStep,
    EnsureToolStep,
    FailurePolicy,
    MigrateConfigStep,
    RetryPolicy,
    StartServicesStep,
    Step,
    StopServicesStep,
)


@dataclass(frozen=True)
class UpgradeParameters:
    """Parameters supplied up front; anything left as None is asked for."""
    platform: Optional[str] = None
    current_version: Optional[str] = None
    upgrade_version: Optional[str] = None


def build_upgrade_steps(settings: UpgradeSettings, params: Optional[UpgradeParameters] = None) -> List[Step]:
    params = params or UpgradeParameters()

    if settings.fail_on_migration_exhaustion:
        migration_policy = FailurePolicy.FATAL
    else:
        # exhausted migrations are reported and the upgrade carries on
        migration_policy = FailurePolicy.WARN_CONTINUE

    return [
        EnsureDirectoryStep(
            id="ensure-work-dir",
            name="Ensure work directory",
            path=settings.work_dir,
        ),
        EnsureToolStep(
            id="ensure-download-tool",
            name="Ensure download tool",
            url=settings.download_tool_url,
            path=settings.download_tool_path,
        ),
        CollectParametersStep(
            id="collect-parameters",
            name="Collect upgrade parameters",
            platform=params.platform,
            current_version=params.current_version,
            upgrade_version=params.upgrade_version,
        ),
        DownloadArtifactStep(
            id="download-release",
            name="Download platform release",
            artifact="release",
            args=list(settings.release_download_args),
            dest=settings.release_download_dest,
        ),
        DownloadArtifactStep(
            id="download-web",
            name="Download web artifact",
            artifact="web",
            args=list(settings.web_download_args),
            dest=settings.web_download_dest,
        ),
        StopServicesStep(
            id="stop-services",
            name="Stop running services",
            process_manager=settings.process_manager,
        ),
        CommandStep(
            id="backup",
            name="Backup",
            command=list(settings.backup_command),
            on_failure=FailurePolicy.PROMPT_CONTINUE,
        ),
        MigrateConfigStep(
            id="migrate-config",
            name="Migrate local configuration",
            source_name=settings.config_source_name,
            stale_name=settings.config_stale_name,
        ),
        CommandStep(
            id="install-dependencies",
            name="Install production dependencies",
            command=list(settings.install_command),
            cwd="{release_dir}",
        ),
        CommandStep(
            id="migrate-database",
            name="Run database migrations",
            command=list(settings.migrate_command),
            cwd="{server_dir}",
            abort_on_launch_error=True,
            on_failure=migration_policy,
            retry=RetryPolicy(
                max=max(settings.migration_attempts - 1, 0),
                backoff_sec=list(settings.migration_backoff_sec),
            ),
        ),
        StartServicesStep(
            id="start-services",
            name="Start services",
            process_manager=settings.process_manager,
        ),
    ]


def build_handler_registry(settings: UpgradeSettings) -> HandlerRegistry:
    renderer = CommandRenderer(settings)
    return HandlerRegistry([
        EnsureDirectoryStepHandler(),
        EnsureToolStepHandler(),
        CollectParametersStepHandler(settings),
        DownloadArtifactStepHandler(settings, renderer),
        StopServicesStepHandler(),
        CommandStepHandler(renderer),
        MigrateConfigStepHandler(),
        StartServicesStepHandler(),
    ])
