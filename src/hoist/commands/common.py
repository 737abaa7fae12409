"""Helpers shared by the CLI commands."""

from __future__ import annotations

from typing import NoReturn

from rich.markup import escape

from hoist import console as con
from hoist.errors import DeploymentError, HoistError


def fail(error: HoistError) -> NoReturn:
    """Print ``error`` and exit with status 1."""
    con.print_error(escape(str(error)))

    if isinstance(error, DeploymentError):
        if error.applied:
            con.err_console.print(
                f"[muted]Created before the failure ({len(error.applied)}):[/muted]"
            )
            for label in error.applied:
                con.print_bullet(escape(label), stderr=True)
        else:
            con.err_console.print("[muted]No resources were created.[/muted]")

    raise SystemExit(1)
