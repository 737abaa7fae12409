"""hoist CLI.

Fetches charts from a git repository and creates their resources with
kubectl.
"""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from hoist.commands import config, doctor, fetch, install, list_charts, update
from hoist.config import HOME_ENV_VAR, HoistConfig, load_config
from hoist.console import configure_logging

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = (
    "Try running the '--help' flag for more information."
)
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_ARGUMENT = "green"
click.rich_click.STYLE_COMMAND = "bold yellow"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.ALIGN_COMMANDS_PANEL = "left"
click.rich_click.ALIGN_OPTIONS_PANEL = "left"
click.rich_click.MAX_WIDTH = 100

CLI_HELP = """Install charts from a git repository into a cluster.

\b
[bold cyan]Quick Start:[/bold cyan]
  [bold yellow]hoist update[/bold yellow]                 Clone or refresh the chart repository
  [bold yellow]hoist list --available[/bold yellow]       Show charts in the repository
  [bold yellow]hoist install CHART[/bold yellow]          Fetch a chart and create its resources
"""


@click.group(help=CLI_HELP)
@click.option(
    "--home",
    type=click.Path(file_okay=True, dir_okay=True, path_type=Path),
    envvar=HOME_ENV_VAR,
    default=None,
    help="Home directory for the repository cache and workspace.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a .hoist.yaml file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
@click.pass_context
def cli(
    ctx: click.Context, home: Path | None, config_file: Path | None, verbose: bool
) -> None:
    """hoist CLI entry point."""
    configure_logging(verbose)

    cfg: HoistConfig = load_config(config_file)
    if home is not None:
        cfg.home = str(home)
    ctx.obj = cfg


cli.add_command(config)
cli.add_command(doctor)
cli.add_command(fetch)
cli.add_command(install)
cli.add_command(list_charts)
cli.add_command(update)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
