"""Workspace inspection commands."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from hoist import console as con
from hoist.chart import load_metadata
from hoist.config import HoistConfig
from hoist.errors import LoadError
from hoist.workspace import (
    CHART_FILE_NAME,
    cache_repo_path,
    missing_binaries,
    workspace_path,
)


def _chart_version(chart_path: Path) -> str | None:
    try:
        return load_metadata(chart_path).version
    except LoadError:
        return None


def _chart_rows(root: Path) -> list[tuple[str, bool, str | None]]:
    if not root.is_dir():
        return []

    rows = []
    for chart_dir in sorted(root.iterdir()):
        if not chart_dir.is_dir() or chart_dir.name.startswith("."):
            continue
        installed: bool = (chart_dir / CHART_FILE_NAME).is_file()
        rows.append((chart_dir.name, installed, _chart_version(chart_dir)))
    return rows


@click.command("list")
@click.option("--available", "-a", is_flag=True, help="List charts in the repository cache.")
@click.pass_obj
def list_charts(config: HoistConfig, available: bool) -> None:
    """List charts in the workspace."""
    home: Path = config.home_path

    if available:
        con.print_header("Charts in repository cache")
        rows = _chart_rows(cache_repo_path(home))
        hint = "Run 'hoist update' to populate the cache."
    else:
        con.print_header("Charts in workspace")
        rows = _chart_rows(workspace_path(home))
        hint = "Run 'hoist fetch CHART' to add a chart."

    if not rows:
        con.print_warning("No charts found")
        con.print_hint(hint)
        return

    con.print_chart_list(rows)


@click.command("doctor")
@click.pass_obj
def doctor(config: HoistConfig) -> None:
    """Check that git and kubectl are available."""
    binaries: tuple[str, ...] = (config.git, config.kubectl)
    missing: list[str] = missing_binaries(binaries)

    for name in binaries:
        if name in missing:
            con.print_error(f"{name} not found on $PATH")
        else:
            con.print_success(f"{name} is installed")

    if missing:
        raise SystemExit(1)
