"""Shared console helpers for projgen.

Every user-visible line goes through the module-level Rich ``console`` so
tests can swap it for a recording console.  Messages carry project names and
child-process output, so they are escaped before being wrapped in markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, out: Console | None = None) -> None:
    """Print the welcome banner shown at the start of a run."""
    target = out or console
    target.print(Panel(f"[bold blue]{escape(title)}[/bold blue]", expand=False))
    target.print()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str, out: Console | None = None) -> None:
    """Print a plain informational message."""
    (out or console).print(f"[green]{escape(message)}[/green]")


def print_output(text: str, out: Console | None = None) -> None:
    """Echo captured child-process output without interpreting markup."""
    if text:
        (out or console).print(text, style="blue", markup=False, highlight=False)
