"""Configuration management commands."""

from __future__ import annotations

from pathlib import Path

import rich_click as click
import yaml

from hoist import console as con
from hoist.config import (
    CONFIG_FILE_NAME,
    HoistConfig,
    generate_default_config,
    save_config,
)


@click.group()
def config() -> None:
    """Manage hoist configuration."""
    pass


@config.command("show")
@click.pass_obj
def config_show(cfg: HoistConfig) -> None:
    """Show the effective configuration."""
    if cfg.source:
        con.print_key_value("Config file", con.format_path(str(cfg.source)))
    else:
        con.print_key_value("Config file", "(using defaults)")

    con.print_yaml(
        yaml.safe_dump(cfg.to_dict(), default_flow_style=False, sort_keys=False)
    )


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing config file.")
def config_init(force: bool) -> None:
    """Write a default .hoist.yaml in the current directory."""
    config_path: Path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        con.print_error(f"Config file already exists: {config_path}")
        con.print_hint("Use --force to overwrite.")
        raise SystemExit(1)

    save_config(HoistConfig(), config_path)

    con.print_success(f"Created {con.format_path(str(config_path))}")
    con.print_yaml(generate_default_config())
