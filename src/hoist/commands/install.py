"""Chart installation commands."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from hoist import actions
from hoist import console as con
from hoist.commands.common import fail
from hoist.config import HoistConfig
from hoist.errors import HoistError
from hoist.kubectl import KubectlClient


@click.command("fetch")
@click.argument("chart_name")
@click.option(
    "--as",
    "local_name",
    help="Name to give the chart in the workspace (defaults to CHART_NAME).",
)
@click.pass_obj
def fetch(config: HoistConfig, chart_name: str, local_name: str | None) -> None:
    """Copy a chart from the repository cache into the workspace."""
    home: Path = config.home_path
    try:
        dest: Path = actions.fetch(chart_name, local_name or chart_name, home)
    except HoistError as e:
        fail(e)

    con.print_success(
        f"Fetched {con.format_chart(chart_name)} to {con.format_path(str(dest))}"
    )


@click.command("install")
@click.argument("chart_name")
@click.option(
    "--namespace",
    "-n",
    default=None,
    help="Target namespace (recorded only; resources keep their own).",
)
@click.pass_obj
def install(config: HoistConfig, chart_name: str, namespace: str | None) -> None:
    """Install a chart into the cluster.

    \b
    The chart is fetched into the workspace first if it is not there yet.
    Resources are created in this order:
      Namespaces, Secrets, PersistentVolumes, Services, Pods,
      ReplicationControllers
    """
    home: Path = config.home_path
    cluster = KubectlClient(config.kubectl)
    con.print_info(f"Installing {con.format_chart(chart_name)} from {con.format_path(str(home))}")

    try:
        applied: list[str] = actions.install(chart_name, home, namespace, cluster)
    except HoistError as e:
        fail(e)

    con.print_success(
        f"Installed {con.format_chart(chart_name)} ({len(applied)} resources)"
    )
