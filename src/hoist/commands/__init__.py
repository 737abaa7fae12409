"""CLI commands for hoist."""

from hoist.commands.config_cmd import config
from hoist.commands.install import fetch, install
from hoist.commands.update import update
from hoist.commands.workspace_cmd import doctor, list_charts

__all__ = [
    "config",
    "doctor",
    "fetch",
    "install",
    "list_charts",
    "update",
]
