"""Repository update command."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from hoist import actions
from hoist import console as con
from hoist.commands.common import fail
from hoist.config import HoistConfig
from hoist.errors import HoistError
from hoist.git import GitClient


@click.command("update")
@click.option(
    "--repo",
    "-r",
    "repo",
    default=None,
    help="Chart repository URL (defaults to the configured repository).",
)
@click.pass_obj
def update(config: HoistConfig, repo: str | None) -> None:
    """Clone or update the chart repository cache."""
    remote: str = repo or config.repository
    try:
        repo_path: Path = actions.update(
            remote,
            config.home_path,
            GitClient(config.git),
            git_binary=config.git,
            kubectl_binary=config.kubectl,
        )
    except HoistError as e:
        fail(e)

    con.print_success(f"Updated {con.format_path(str(repo_path))} from {remote}")
