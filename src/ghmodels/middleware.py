"""Console logging middleware for langchain agents.

Shows the three main middleware hooks:

1. ``before_model`` runs before every LLM call
2. ``after_model`` runs after every LLM call
3. ``wrap_tool_call`` wraps every tool execution

The hooks only observe. They return no state updates and hand the tool
result back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from langchain.agents.middleware import AgentMiddleware
from rich.markup import escape
from rich.text import Text

from ghmodels.formatting import make_console, message_text, tool_call_names

if TYPE_CHECKING:
    from rich.console import Console


def _messages(state: Any) -> list[Any]:
    if isinstance(state, dict):
        return list(state.get("messages") or [])
    return list(getattr(state, "messages", None) or [])


class ConsoleLoggerMiddleware(AgentMiddleware):
    """Print what the agent is doing at each hook point."""

    name = "simple-logger"

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console or make_console()

    def before_model(self, state: Any, runtime: Any) -> dict[str, Any] | None:
        messages = _messages(state)
        self._console.print()
        self._console.print(Text("[BEFORE MODEL]", style="bold blue"))
        self._console.print(f"Messages in context: {len(messages)}")
        if messages:
            last = escape(message_text(messages[-1]))
            self._console.print(f'Last message: "{last}"')
        return None

    def after_model(self, state: Any, runtime: Any) -> dict[str, Any] | None:
        messages = _messages(state)
        self._console.print()
        self._console.print(Text("[AFTER MODEL]", style="bold magenta"))
        self._console.print("Response received from the LLM")
        called = bool(messages) and bool(tool_call_names(messages[-1]))
        self._console.print(f"Called tools? {'Yes' if called else 'No'}")
        return None

    def wrap_tool_call(self, request: Any, handler: Callable[[Any], Any]) -> Any:
        tool_call = getattr(request, "tool_call", None) or {}
        tool = getattr(request, "tool", None)
        tool_name = getattr(tool, "name", None) or tool_call.get("name", "?")

        self._console.print()
        self._console.print(Text("[TOOL CALL]", style="bold yellow"))
        self._console.print(f"Tool: {escape(str(tool_name))}")
        self._console.print(f"Arguments: {escape(str(tool_call.get('args', {})))}")

        result = handler(request)

        content = message_text(result) if hasattr(result, "content") else str(result)
        self._console.print(f"Result: {escape(content)}")
        return result
