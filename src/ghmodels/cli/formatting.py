"""Rich formatting helpers for the ghmodels CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from ghmodels.llm.probe import ProbeResult


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False, highlight=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def format_failure_details(
    console: Console,
    *,
    status_code: int | None = None,
    detail: str | None = None,
    hint: str | None = None,
) -> None:
    """Display status, response body and hint lines, skipping empty ones."""
    if status_code is not None:
        console.print(f"  Status:  {status_code}")
    if detail:
        console.print(f"  Details: {escape(detail)}")
    if hint:
        console.print(f"  [yellow]{escape(hint)}[/yellow]")


def format_probe(result: ProbeResult, console: Console) -> None:
    """Display the outcome of a credential probe."""
    if result.ok:
        console.print("[green]Token is valid[/green] - endpoint reachable and authorized.")
        return
    console.print("[red]Invalid token or connection problem[/red]")
    if result.error:
        console.print(f"  Error:   {escape(result.error)}")
    format_failure_details(
        console,
        status_code=result.status_code,
        detail=result.detail,
        hint=result.hint,
    )


def format_reply(text: str, console: Console) -> None:
    """Display a model reply."""
    console.print("[bold]Answer:[/bold]")
    console.print(escape(text))
