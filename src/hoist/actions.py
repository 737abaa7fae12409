"""Chart workflows: update, fetch and install.

Every function takes explicit paths and clients and raises a HoistError
subclass on failure; turning errors into exit codes is left to the CLI.
"""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

from hoist.chart import load_chart
from hoist.errors import (
    ApplyError,
    DeploymentError,
    FetchError,
    LoadError,
    SerializationError,
)
from hoist.manifest import DEFAULT_API_VERSION, marshal_json
from hoist.models import describe_resource
from hoist.workspace import (
    cache_repo_path,
    cached_chart_path,
    chart_installed,
    ensure_home,
    ensure_prereqs,
    workspace_chart_path,
)

if TYPE_CHECKING:
    from pathlib import Path

    from hoist.git import VCSClient
    from hoist.kubectl import ClusterClient
    from hoist.models import Chart

logger = logging.getLogger(__name__)


def update(
    repo: str,
    home: Path,
    git: VCSClient,
    git_binary: str = "git",
    kubectl_binary: str = "kubectl",
) -> Path:
    """Clone or update the chart repository under ``home``.

    Clones on first run, otherwise pulls into the existing clone.
    Returns the path of the local clone.
    """
    ensure_prereqs(git_binary, kubectl_binary)
    home = ensure_home(home)
    repo_path: Path = cache_repo_path(home)

    if not git.check_local(repo_path):
        logger.info("Cloning repo into %s. Please wait.", repo_path)
        git.clone(repo, repo_path)

    git.update(repo_path)
    logger.info("Updated %s", repo_path)
    return repo_path


def fetch(chart: str, name: str, home: Path) -> Path:
    """Copy ``chart`` from the repository cache into the workspace as ``name``."""
    source: Path = cached_chart_path(home, chart)
    dest: Path = workspace_chart_path(home, name)

    if not source.is_dir():
        raise FetchError(
            f"Chart {chart!r} not found in {cache_repo_path(home)}. "
            "Run 'hoist update' first."
        )

    logger.info("Fetching %s into %s", chart, dest)
    try:
        shutil.copytree(
            source, dest, dirs_exist_ok=True, ignore=shutil.ignore_patterns(".git")
        )
    except (OSError, shutil.Error) as e:
        raise FetchError(f"Could not copy {source} to {dest}: {e}") from e
    return dest


def upload_manifests(
    chart: Chart,
    cluster: ClusterClient,
    api_version: str = DEFAULT_API_VERSION,
) -> list[str]:
    """Create every resource of ``chart`` in dependency order.

    Stops at the first resource that cannot be encoded or created and
    raises DeploymentError listing what was created before it. Nothing is
    rolled back. Returns the labels of the created resources.
    """
    applied: list[str] = []

    for kind, resource in chart.in_order():
        label: str = describe_resource(kind, resource)
        try:
            data: bytes = marshal_json(resource, api_version)
            logger.debug("File: %s", data.decode("utf-8"))
            cluster.create(data)
        except (SerializationError, ApplyError) as e:
            raise DeploymentError(label, e, applied) from e

        logger.info("Created %s", label)
        applied.append(label)

    return applied


def install(
    chart: str,
    home: Path,
    namespace: str | None,
    cluster: ClusterClient,
) -> list[str]:
    """Install ``chart`` from the workspace, fetching it first if needed.

    ``namespace`` is recorded but not yet applied to the resources.
    """
    if not chart_installed(home, chart):
        logger.info("No installed chart named %r. Installing now.", chart)
        fetch(chart, chart, home)

    if namespace:
        logger.debug("Namespace %r requested; resources keep their own", namespace)

    try:
        loaded: Chart = load_chart(workspace_chart_path(home, chart))
    except LoadError as e:
        raise LoadError(f"Failed to load chart: {e}") from e

    return upload_manifests(loaded, cluster)
