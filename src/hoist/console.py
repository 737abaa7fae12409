"""Rich console output utilities for the hoist CLI.

User-facing messages go through the ``print_*`` helpers. Library modules
log through the standard ``logging`` module; ``configure_logging`` routes
those records to stderr with Rich formatting.
"""

from __future__ import annotations

import logging
from typing import LiteralString

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme

HOIST_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "heading": "bold magenta",
        "muted": "dim",
        "chart": "bold blue",
        "version": "cyan",
        "path": "dim cyan",
    }
)


console = Console(theme=HOIST_THEME)
err_console = Console(theme=HOIST_THEME, stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Send ``hoist`` log records to stderr.

    INFO by default, DEBUG with ``verbose``. Safe to call more than once.
    """
    logger = logging.getLogger("hoist")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def print_success(message: str, prefix: str = "✓") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}[/success] {message}")


def print_error(message: str, prefix: str = "✗") -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]{prefix}[/error] {message}")


def print_warning(message: str, prefix: str = "⚠") -> None:
    """Print a warning message."""
    console.print(f"[warning]{prefix}[/warning] {message}")


def print_info(message: str, prefix: str = "•") -> None:
    """Print an info message."""
    console.print(f"[info]{prefix}[/info] {message}")


def print_header(title: str) -> None:
    """Print a section header."""
    console.print(f"\n[heading]{title}[/heading]")
    console.print(f"[muted]{'─' * len(title)}[/muted]")


def print_key_value(key: str, value: str, indent: int = 0) -> None:
    """Print a key-value pair."""
    spaces: LiteralString = "  " * indent
    console.print(f"{spaces}[muted]{key}:[/muted] {value}")


def print_bullet(text: str, indent: int = 1, stderr: bool = False) -> None:
    """Print a bullet point."""
    spaces: LiteralString = "  " * indent
    target: Console = err_console if stderr else console
    target.print(f"{spaces}[muted]•[/muted] {text}")


def print_hint(message: str) -> None:
    """Print a hint for the user."""
    console.print(f"  [muted]Hint:[/muted] [dim]{message}[/dim]")


def format_chart(name: str) -> str:
    return f"[chart]{name}[/chart]"


def format_path(path: str) -> str:
    return f"[path]{path}[/path]"


def format_check(ok: bool) -> str:
    """Format a check/cross mark."""
    return "[success]✓[/success]" if ok else "[error]✗[/error]"


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a styled table."""
    return Table(
        title=title,
        show_header=show_header,
        header_style="bold",
        border_style="muted",
        title_style="heading",
    )


def print_chart_list(charts: list[tuple[str, bool, str | None]]) -> None:
    """Print charts as (name, installed, version) rows."""
    table: Table = create_table()
    table.add_column("Installed", justify="center", width=9)
    table.add_column("Chart", style="chart")
    table.add_column("Version", style="version")

    for name, installed, version in charts:
        table.add_row(format_check(installed), name, version or "-")

    console.print(table)


def print_yaml(content: str, title: str | None = None) -> None:
    """Print YAML content with syntax highlighting."""
    syntax = Syntax(content, "yaml", theme="monokai", line_numbers=False)
    if title:
        console.print(Panel(syntax, title=title, border_style="muted"))
    else:
        console.print(syntax)
