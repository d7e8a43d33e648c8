# infrastructure/config/yaml_settings_loader.py
"""
Build UpgradeSettings from a YAML settings file.

Example::

    paths:
      work_dir: /opt/platform-upgrade
      releases_dir: /opt/platform/releases
    download:
      tool_url: https://example.com/fetch
      repo: https://github.com/example-org/platform
    process_manager:
      command: pm2
    commands:
      backup: [bash, /opt/platform-upgrade/backup.sh]
    migrations:
      attempts: 3
      fail_on_exhaustion: false
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

import yaml

from domain.settings import UpgradeSettings


class SettingsLoadError(Exception):
    pass


class YamlSettingsLoader:
    def __init__(self, base: UpgradeSettings | None = None):
        self._base = base or UpgradeSettings()

    def load_from_file(self, path: str | Path) -> UpgradeSettings:
        p = Path(path)
        if not p.exists():
            raise SettingsLoadError(f"Settings file not found: {path}")

        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsLoadError(f"Settings file is not valid YAML: {path}: {e}") from e

        if data is None:
            return self._base

        if not isinstance(data, dict):
            raise SettingsLoadError(f"Settings file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> UpgradeSettings:
        updates: Dict[str, Any] = {}

        paths = self._section(data, "paths")
        self._set_path(updates, paths, "work_dir", "work_dir")
        self._set_path(updates, paths, "releases_dir", "releases_dir")

        download = self._section(data, "download")
        self._set_str(updates, download, "tool_url", "download_tool_url")
        self._set_str(updates, download, "tool_name", "download_tool_name")
        self._set_str(updates, download, "repo", "repo")
        self._set_list(updates, download, "release_args", "release_download_args")
        self._set_str(updates, download, "release_dest", "release_download_dest")
        self._set_list(updates, download, "web_args", "web_download_args")
        self._set_str(updates, download, "web_dest", "web_download_dest")

        pm = self._section(data, "process_manager")
        self._set_str(updates, pm, "command", "process_manager")
        self._set_str(updates, pm, "config_file", "process_config_name")

        layout = self._section(data, "release")
        self._set_str(updates, layout, "server_package", "server_package")
        self._set_str(updates, layout, "config_dir", "config_dir")

        config_file = self._section(data, "config_file")
        self._set_str(updates, config_file, "source_name", "config_source_name")
        self._set_str(updates, config_file, "stale_name", "config_stale_name")

        commands = self._section(data, "commands")
        self._set_list(updates, commands, "backup", "backup_command")
        self._set_list(updates, commands, "install", "install_command")
        self._set_list(updates, commands, "migrate", "migrate_command")

        migrations = self._section(data, "migrations")
        if "attempts" in migrations:
            attempts = migrations["attempts"]
            if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
                raise SettingsLoadError("migrations.attempts must be a positive integer")
            updates["migration_attempts"] = attempts
        if "backoff_sec" in migrations:
            backoff = migrations["backoff_sec"]
            if not isinstance(backoff, list) or not all(isinstance(b, int) and b >= 0 for b in backoff):
                raise SettingsLoadError("migrations.backoff_sec must be a list of non-negative integers")
            updates["migration_backoff_sec"] = backoff
        if "fail_on_exhaustion" in migrations:
            flag = migrations["fail_on_exhaustion"]
            if not isinstance(flag, bool):
                raise SettingsLoadError("migrations.fail_on_exhaustion must be true or false")
            updates["fail_on_migration_exhaustion"] = flag

        logging_section = self._section(data, "logging")
        self._set_path(updates, logging_section, "file", "log_file")

        return replace(self._base, **updates)

    def _section(self, data: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise SettingsLoadError(f"Section '{name}' must be a mapping")
        return section

    def _set_str(self, updates: Dict[str, Any], section: Dict[str, Any], key: str, field_name: str) -> None:
        if key not in section:
            return
        value = section[key]
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            raise SettingsLoadError(f"'{key}' must be a string")
        updates[field_name] = str(value)

    def _set_path(self, updates: Dict[str, Any], section: Dict[str, Any], key: str, field_name: str) -> None:
        if key not in section:
            return
        value = section[key]
        if not isinstance(value, str) or not value:
            raise SettingsLoadError(f"'{key}' must be a non-empty path")
        updates[field_name] = Path(value)

    def _set_list(self, updates: Dict[str, Any], section: Dict[str, Any], key: str, field_name: str) -> None:
        if key not in section:
            return
        value = section[key]
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, list) or not value:
            raise SettingsLoadError(f"'{key}' must be a non-empty list of arguments")
        items: List[str] = [str(v) for v in value]
        updates[field_name] = items
