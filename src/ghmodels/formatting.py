"""Console output for ghmodels examples.

Uses rich for terminal output. Functions take an optional Console so output
can be captured (``Console(file=StringIO())``) in tests.

Messages are handled duck-typed through their ``type`` attribute
("human", "ai", "tool", "system") so this module does not import
langchain at module level.
"""
from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

_PREVIEW_CHARS = 50

_RATE_LIMITS: tuple[tuple[str, str], ...] = (
    ("Requests per minute", "Varies by model"),
    ("Requests per day", "Limited"),
    ("Tokens per request", "Varies by model"),
    ("Usage", "Free for experimentation / prototyping"),
)


def _ensure_utf8_stdout() -> None:
    """Reconfigure stdout to UTF-8 on Windows to avoid cp1252 encoding errors."""
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            pass


def make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, width=100, highlight=False)
    _ensure_utf8_stdout()
    return Console(highlight=False)


def print_rate_limit_notice(console: Console | None = None) -> None:
    """Print the GitHub Models free-tier rate-limit notice."""
    console = console or make_console()

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Limit", style="bold")
    table.add_column("Value")
    for label, value in _RATE_LIMITS:
        table.add_row(label, value)

    console.print()
    console.print(Panel(
        table,
        title="Rate limits - GitHub Models (free tier)",
        title_align="left",
        border_style="dim",
    ))
    console.print(
        "For production, move to Azure OpenAI or OpenAI directly\n"
        "  (same API, only the base URL and API key change)\n"
    )


def message_text(message: Any) -> str:
    """Return a message's content as text (list content is joined)."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


def tool_call_names(message: Any) -> list[str]:
    """Names of the tools an AI message asked for (empty if none)."""
    calls = getattr(message, "tool_calls", None) or []
    if not calls:
        extra = getattr(message, "additional_kwargs", None) or {}
        calls = extra.get("tool_calls") or []
    names = []
    for call in calls:
        if isinstance(call, dict):
            name = call.get("name") or (call.get("function") or {}).get("name")
        else:
            name = getattr(call, "name", None)
        if name:
            names.append(name)
    return names


def _preview(text: str) -> str:
    return f"{text[:_PREVIEW_CHARS]}..."


def describe_flow(messages: list[Any]) -> list[str]:
    """One line per message describing how an agent run unfolded."""
    lines = []
    for idx, msg in enumerate(messages, start=1):
        kind = getattr(msg, "type", None)
        if kind == "human":
            lines.append(f"{idx}. User: {_preview(message_text(msg))}")
        elif kind == "ai":
            names = tool_call_names(msg)
            if names:
                lines.append(f"{idx}. AI decided to call: {', '.join(names)}")
            else:
                lines.append(f"{idx}. AI final answer")
        elif kind == "tool":
            lines.append(f"{idx}. Tool result")
    return lines


def describe_history(messages: list[Any]) -> list[str]:
    """One line per message: class name and a content preview."""
    lines = []
    for idx, msg in enumerate(messages, start=1):
        content = getattr(msg, "content", None)
        preview = _preview(content) if isinstance(content, str) else "[tool call]..."
        lines.append(f"{idx}. {type(msg).__name__}: {preview}")
    return lines


def print_flow(messages: list[Any], console: Console | None = None) -> None:
    """Print describe_flow() output."""
    console = console or make_console()
    console.print(f"Total messages: {len(messages)}")
    for line in describe_flow(messages):
        console.print(f"  {escape(line)}")


def print_history(messages: list[Any], console: Console | None = None) -> None:
    """Print describe_history() output."""
    console = console or make_console()
    console.print(f"Total messages: {len(messages)}")
    for line in describe_history(messages):
        console.print(f"  {escape(line)}")
