# infrastructure/config/env_overrides.py
from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from dotenv import dotenv_values

from domain.exceptions import ValidationError
from domain.settings import UpgradeSettings


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ValidationError(f"Expected an integer, got '{raw}'") from e
    if value < 1:
        raise ValidationError(f"Expected a positive integer, got '{raw}'")
    return value


# env var -> (settings field, converter)
ENV_FIELDS: Dict[str, tuple[str, Callable[[str], Any]]] = {
    "UPGRADE_WORK_DIR": ("work_dir", Path),
    "UPGRADE_RELEASES_DIR": ("releases_dir", Path),
    "UPGRADE_LOG_FILE": ("log_file", Path),
    "UPGRADE_DOWNLOAD_TOOL_URL": ("download_tool_url", str),
    "UPGRADE_REPO": ("repo", str),
    "UPGRADE_PROCESS_MANAGER": ("process_manager", str),
    "UPGRADE_MIGRATION_ATTEMPTS": ("migration_attempts", _positive_int),
}


class EnvSettingsOverrides:
    """
    Apply ``UPGRADE_*`` variables on top of loaded settings.

    Values come from a ``.env`` file (when present) and the process
    environment; the ``.env`` file wins for keys defined in both.
    """

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        env_path = env_file if env_file is not None else Path.cwd() / ".env"
        if env_path.exists():
            self._env_vars: Dict[str, Optional[str]] = dict(dotenv_values(env_path))
        else:
            self._env_vars = {}

        source = os.environ if environ is None else environ
        for key, value in source.items():
            if key not in self._env_vars:
                self._env_vars[key] = value

    def apply(self, settings: UpgradeSettings) -> UpgradeSettings:
        updates: Dict[str, Any] = {}
        for env_key, (field_name, convert) in ENV_FIELDS.items():
            raw = self._env_vars.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                updates[field_name] = convert(raw)
            except ValidationError as e:
                raise ValidationError(f"{env_key}: {e}") from e
        if not updates:
            return settings
        return replace(settings, **updates)
