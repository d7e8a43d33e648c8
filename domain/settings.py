# domain/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


DEFAULT_DOWNLOAD_TOOL_URL = (
    "https://github.com/gruntwork-io/fetch/releases/download/v0.4.6/fetch_linux_amd64"
)


@dataclass(frozen=True)
class UpgradeSettings:
    # paths
    work_dir: Path = Path("/opt/platform-upgrade")
    releases_dir: Path = Path("/opt/platform/releases")
    log_file: Optional[Path] = None

    # download
    download_tool_url: str = DEFAULT_DOWNLOAD_TOOL_URL
    download_tool_name: str = "fetch"
    repo: str = "https://github.com/example-org/platform"
    release_download_args: List[str] = field(
        default_factory=lambda: ["--repo={repo}", "--ref=v{version}", "--source-path=/", "{dest}"]
    )
    release_download_dest: str = "{release_dir}"
    web_download_args: List[str] = field(
        default_factory=lambda: [
            "--repo={repo}",
            "--tag=v{version}",
            "--release-asset=web-v{version}.tar.gz",
            "{dest}",
        ]
    )
    web_download_dest: str = "{release_dir}/web"

    # process manager
    process_manager: str = "pm2"
    process_config_name: str = "pm2.config.cjs"

    # release layout
    server_package: str = "packages/{platform}-server"
    config_dir: str = "config"
    config_source_name: str = "local.json"
    config_stale_name: str = "production.json"

    # commands
    backup_command: List[str] = field(default_factory=lambda: ["bash", "{work_dir}/backup.sh"])
    install_command: List[str] = field(default_factory=lambda: ["npm", "install", "--omit=dev"])
    migrate_command: List[str] = field(default_factory=lambda: ["npm", "run", "migrate"])

    # migrations
    migration_attempts: int = 3
    migration_backoff_sec: List[int] = field(default_factory=list)
    fail_on_migration_exhaustion: bool = False

    @property
    def download_tool_path(self) -> Path:
        return self.work_dir / self.download_tool_name

    @property
    def session_log_file(self) -> Path:
        """Log file for the console session; defaults to ``<work_dir>/upgrade.log``."""
        return self.log_file if self.log_file is not None else self.work_dir / "upgrade.log"
