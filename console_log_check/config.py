"""Hook configuration.

Resolved once at startup from the environment and an optional YAML file
(``.claude/console-log-check.yaml``), then passed into ``run_hook``.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

TEAM_MEMBER_ENV = "CLAUDE_AGENT_TEAM_MEMBER"
TEAM_NAME_ENV = "CLAUDE_TEAM_NAME"
CONFIG_PATH_ENV = "CONSOLE_LOG_CHECK_CONFIG"

DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
CONFIG_FILENAME = "console-log-check.yaml"


@dataclass(frozen=True)
class HookConfig:
    """Everything a single hook run needs to know up front."""

    team_member: bool = False
    team_name: str = ""
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HookConfig":
        environ = os.environ if environ is None else environ
        return cls(
            team_member=environ.get(TEAM_MEMBER_ENV) == "1",
            team_name=environ.get(TEAM_NAME_ENV, ""),
        )

    @property
    def skip_reason(self) -> str | None:
        """Name of the environment guard that disables the hook, if any."""
        # Team members: a full diff is too slow with many agents sharing a tree.
        # Team leads: stop-hook stdout is shared with other hooks.
        if self.team_member:
            return TEAM_MEMBER_ENV
        if self.team_name:
            return TEAM_NAME_ENV
        return None


def get_project_root(cwd: Path | None = None) -> Path:
    """Nearest ancestor of cwd holding a .claude/ directory, else cwd."""
    start = (cwd or Path.cwd()).resolve()
    current = start
    while current != current.parent:
        if (current / ".claude").is_dir():
            return current
        current = current.parent
    return start


def find_config_file(
    environ: Mapping[str, str], cwd: Path | None = None, config_path: str | None = None
) -> Path | None:
    """Pick the override file: explicit path, then env var, then .claude/."""
    if config_path:
        return Path(config_path)
    if environ.get(CONFIG_PATH_ENV):
        return Path(environ[CONFIG_PATH_ENV])

    candidate = get_project_root(cwd) / ".claude" / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def apply_overrides(config: HookConfig, path: Path) -> HookConfig:
    """Return config with extensions taken from a YAML file.

    Invalid files or values leave the defaults untouched.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.debug("Ignoring config file %s: %s", path, exc)
        return config

    if data is None:
        return config
    if not isinstance(data, dict):
        logger.debug("Ignoring config file %s: top level is not a mapping", path)
        return config

    extensions = data.get("extensions")
    if extensions is None:
        return config
    if not isinstance(extensions, list) or not all(isinstance(e, str) and e for e in extensions):
        logger.debug("Ignoring 'extensions' in %s: expected a list of strings", path)
        return config

    return replace(config, extensions=tuple(extensions))


def load_config(
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    config_path: str | None = None,
) -> HookConfig:
    """Resolve the full configuration for one hook run."""
    environ = os.environ if environ is None else environ
    config = HookConfig.from_env(environ)

    # Guarded runs do no further work, not even reading the config file
    if config.skip_reason:
        return config

    path = find_config_file(environ, cwd, config_path)
    if path is None:
        return config

    logger.debug("Loading overrides from %s", path)
    return apply_overrides(config, path)
