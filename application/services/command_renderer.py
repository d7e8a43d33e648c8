# application/services/command_renderer.py
from __future__ import annotations

from typing import Any, Dict, List

from domain.exceptions import ValidationError
from domain.run import RunContext
from domain.settings import UpgradeSettings


class CommandRenderer:
    """
    Fill ``{placeholder}`` fields in command arguments and paths.

    Settings-level values are always available. Release values
    (``platform``, ``upgrade_version``, ``release_dir`` ...) appear once the
    run parameters have been collected.
    """

    def __init__(self, settings: UpgradeSettings):
        self._settings = settings

    def values(self, ctx: RunContext, **extra: Any) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "work_dir": str(self._settings.work_dir),
            "releases_dir": str(self._settings.releases_dir),
            "download_tool": str(self._settings.download_tool_path),
            "repo": self._settings.repo,
        }
        config = ctx.config
        if config is not None:
            values.update(
                platform=config.platform,
                current_version=config.current_version,
                upgrade_version=config.upgrade_version,
                version=config.upgrade_version,
                release_dir=str(config.paths.upgrade_release_dir),
                server_dir=str(config.paths.upgrade_server_dir),
                current_release_dir=str(config.paths.current_release_dir),
            )
        values.update(extra)
        return values

    def render(self, template: str, ctx: RunContext, **extra: Any) -> str:
        values = self.values(ctx, **extra)
        try:
            return template.format(**values)
        except KeyError as e:
            raise ValidationError(f"Unknown placeholder {e} in '{template}'") from e
        except (IndexError, ValueError) as e:
            raise ValidationError(f"Malformed template '{template}': {e}") from e

    def render_args(self, args: List[str], ctx: RunContext, **extra: Any) -> List[str]:
        return [self.render(a, ctx, **extra) for a in args]
