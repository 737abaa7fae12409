"""Configuration management for hoist.

Settings come from a ``.hoist.yaml`` file found by walking up from the
current directory. Anything missing falls back to the defaults below.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = ".hoist.yaml"

HOME_ENV_VAR = "HOIST_HOME"

DEFAULT_HOME = "~/.hoist"

DEFAULT_REPOSITORY = "https://github.com/deis/charts"


@dataclass
class HoistConfig:
    """Main configuration for hoist."""

    home: str = DEFAULT_HOME
    """Home directory holding the repository cache and the workspace."""

    repository: str = DEFAULT_REPOSITORY
    """Git URL of the chart repository."""

    git: str = "git"
    """Name or path of the git binary."""

    kubectl: str = "kubectl"
    """Name or path of the kubectl binary."""

    source: Path | None = field(default=None, compare=False)
    """File the settings were read from, or None when using defaults."""

    @property
    def home_path(self) -> Path:
        return Path(self.home).expanduser()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HoistConfig:
        """Create config from a dictionary."""
        return cls(
            home=resolve_env_var(data.get("home")) or DEFAULT_HOME,
            repository=resolve_env_var(data.get("repository")) or DEFAULT_REPOSITORY,
            git=resolve_env_var(data.get("git")) or "git",
            kubectl=resolve_env_var(data.get("kubectl")) or "kubectl",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "home": self.home,
            "repository": self.repository,
            "git": self.git,
            "kubectl": self.kubectl,
        }


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the config file by walking up the directory tree.

    Starts from start_path (or cwd) and walks up looking for .hoist.yaml.
    """
    if start_path is None:
        start_path = Path.cwd()

    current: Path = start_path
    while current != current.parent:
        config_path: Path = current / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        current = current.parent

    return None


def load_config(config_path: Path | None = None) -> HoistConfig:
    """Load configuration from file or return defaults.

    If config_path is None, searches for .hoist.yaml in the directory tree.
    The HOIST_HOME environment variable, when set, overrides ``home``.
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        config = HoistConfig()
    else:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = HoistConfig.from_dict(data)
        config.source = config_path

    env_home: str | None = os.environ.get(HOME_ENV_VAR)
    if env_home:
        config.home = env_home

    return config


def save_config(config: HoistConfig, config_path: Path) -> None:
    """Save configuration to a file."""
    with config_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def generate_default_config() -> str:
    """Generate default configuration as YAML string."""
    return yaml.safe_dump(
        HoistConfig().to_dict(), default_flow_style=False, sort_keys=False
    )


def resolve_env_var(value: Any) -> str | None:
    """Resolve environment variable references in a string.

    Supports:
    - $VAR_NAME -> os.environ.get("VAR_NAME")
    - ${VAR_NAME} -> os.environ.get("VAR_NAME")
    - Plain values returned as-is

    Non-string scalars such as numbers are converted with ``str``.
    Returns None if the value is None or if the env var is not set.
    """
    if value is None:
        return None
    value = str(value)

    if value.startswith("$"):
        var_name: str = value[1:]
        if var_name.startswith("{") and var_name.endswith("}"):
            var_name = var_name[1:-1]
        return os.environ.get(var_name)

    return value
