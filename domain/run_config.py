# domain/run_config.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from domain.settings import UpgradeSettings


class Platform(str, Enum):
    CENTRAL = "central"
    FACILITY = "facility"

    @classmethod
    def lookup(cls, raw: str) -> Optional["Platform"]:
        value = (raw or "").strip().lower()
        for platform in cls:
            if platform.value == value:
                return platform
        return None


def platform_name(raw: str) -> str:
    """Known platforms are normalised to their canonical name; anything else is kept as typed."""
    known = Platform.lookup(raw)
    if known is not None:
        return known.value
    return str(raw or "").strip()


@dataclass(frozen=True)
class ReleasePaths:
    current_release_dir: Path
    upgrade_release_dir: Path
    current_server_dir: Path
    upgrade_server_dir: Path
    current_config_dir: Path
    upgrade_config_dir: Path
    process_config_file: Path


@dataclass(frozen=True)
class RunConfig:
    platform: str
    current_version: str
    upgrade_version: str
    paths: ReleasePaths

    @classmethod
    def create(
        cls,
        platform: str,
        current_version: str,
        upgrade_version: str,
        settings: UpgradeSettings,
    ) -> "RunConfig":
        """
        Build a RunConfig, deriving every release path from the two versions.

        Platform and versions are taken as given (no format check); a bad
        value surfaces later when the download or copy step cannot find what
        it expects.
        """
        platform = platform_name(platform)
        package = settings.server_package.format(platform=platform)

        current_release = settings.releases_dir / current_version
        upgrade_release = settings.releases_dir / upgrade_version
        current_server = current_release / package
        upgrade_server = upgrade_release / package

        paths = ReleasePaths(
            current_release_dir=current_release,
            upgrade_release_dir=upgrade_release,
            current_server_dir=current_server,
            upgrade_server_dir=upgrade_server,
            current_config_dir=current_server / settings.config_dir,
            upgrade_config_dir=upgrade_server / settings.config_dir,
            process_config_file=upgrade_release / settings.process_config_name,
        )
        return cls(
            platform=platform,
            current_version=current_version,
            upgrade_version=upgrade_version,
            paths=paths,
        )
