"""Home directory layout and bootstrap.

A hoist home looks like::

    <home>/
        cache/
            charts/          git clone of the chart repository
        workspace/
            <chart>/         one directory per fetched chart
                Chart.yaml
                manifests/
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from hoist.errors import ConfigurationError

logger = logging.getLogger(__name__)

CACHE_PATH = "cache"
CACHE_REPO_PATH = "cache/charts"
WORKSPACE_PATH = "workspace"
CHART_FILE_NAME = "Chart.yaml"

REQUIRED_PATHS: tuple[str, ...] = (CACHE_PATH, WORKSPACE_PATH)

REQUIRED_BINARIES: tuple[str, ...] = ("git", "kubectl")


def cache_repo_path(home: Path) -> Path:
    return home / CACHE_REPO_PATH


def cached_chart_path(home: Path, chart: str) -> Path:
    return cache_repo_path(home) / chart


def workspace_path(home: Path) -> Path:
    return home / WORKSPACE_PATH


def workspace_chart_path(home: Path, chart: str) -> Path:
    return workspace_path(home) / chart


def chart_installed(home: Path, chart: str) -> bool:
    """Check whether ``chart`` has been fetched into the workspace.

    Only the presence of Chart.yaml as a regular file is checked; its
    contents are not parsed.
    """
    chart_file: Path = workspace_chart_path(home, chart) / CHART_FILE_NAME
    logger.debug("Looking for %s", chart_file)
    if not chart_file.is_file():
        logger.debug("No chart at %s", chart_file)
        return False
    return True


def ensure_home(home: Path) -> Path:
    """Create the home directory and its required subdirectories.

    Returns the absolute home path. Raises ConfigurationError, without
    creating anything, if ``home`` exists but is not a directory.
    """
    home = home.expanduser().absolute()

    if home.exists() and not home.is_dir():
        raise ConfigurationError(f"{home} must be a directory.")

    if not home.exists():
        logger.info("Creating %s", home)

    for rel in REQUIRED_PATHS:
        path: Path = home / rel
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Could not create {path}: {e}") from e

    return home


def missing_binaries(binaries: tuple[str, ...] = REQUIRED_BINARIES) -> list[str]:
    return [name for name in binaries if shutil.which(name) is None]


def ensure_prereqs(git: str = "git", kubectl: str = "kubectl") -> None:
    """Verify that git and kubectl are both on PATH."""
    missing: list[str] = missing_binaries((git, kubectl))
    if missing:
        raise ConfigurationError(
            f"Could not find {', '.join(repr(m) for m in missing)} on $PATH"
        )
