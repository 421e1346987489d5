"""Agent builders for the cookbook examples.

Each builder wires a chat model, tools and middleware into
``langchain.agents.create_agent``. When no model is passed, a tuned
GitHub Models client is created with the example's tuning.

Agents keep no memory between ``invoke`` calls: pass every message the
model should see in a single call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ghmodels.formatting import message_text
from ghmodels.llm.chat import ChatTuning, create_tuned_client
from ghmodels.middleware import ConsoleLoggerMiddleware
from ghmodels.settings import DEFAULT_MODEL, ModelsSettings
from ghmodels.tools import WEATHER_TOOLS, calculator

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

HELLO_PROMPT = """\
You are a helpful and polite assistant.
Be direct, clear and friendly in your answers."""

CALCULATOR_PROMPT = """\
You are a helpful math assistant. When the user asks for calculations, use the
'calculator' tool. Always explain the result clearly and kindly."""

WEATHER_PROMPT = """\
You are a friendly and helpful weather assistant.

You have access to 3 tools:
1. get_weather: to look up the weather for a city
2. suggest_clothing: to suggest clothing based on the temperature
3. suggest_activity: to suggest activities based on the weather condition

When the user asks about the weather, use ALL the relevant tools to give a
complete and useful answer. Combine the information naturally."""

MIDDLEWARE_PROMPT = """\
You are a helpful math assistant.
Use the 'calculator' tool when you need to do calculations.
Always explain the result clearly."""


def _model(
    model: BaseChatModel | None,
    tuning: ChatTuning,
    settings: ModelsSettings | None,
) -> BaseChatModel:
    if model is not None:
        return model
    return create_tuned_client(DEFAULT_MODEL, tuning, settings=settings)


def build_agent(
    model: BaseChatModel,
    *,
    tools: Sequence[Any] = (),
    system_prompt: str | None = None,
    middleware: Sequence[Any] = (),
) -> Any:
    """Thin wrapper over ``create_agent`` used by all examples."""
    from langchain.agents import create_agent

    return create_agent(
        model=model,
        tools=list(tools),
        system_prompt=system_prompt,
        middleware=list(middleware),
    )


def build_hello_agent(
    model: BaseChatModel | None = None,
    *,
    settings: ModelsSettings | None = None,
) -> Any:
    """Agent with no tools."""
    llm = _model(model, ChatTuning(temperature=0.3, max_tokens=500), settings)
    return build_agent(llm, system_prompt=HELLO_PROMPT)


def build_calculator_agent(
    model: BaseChatModel | None = None,
    *,
    settings: ModelsSettings | None = None,
) -> Any:
    """Agent with the calculator tool."""
    llm = _model(model, ChatTuning(temperature=0.3, max_tokens=500), settings)
    return build_agent(llm, tools=[calculator], system_prompt=CALCULATOR_PROMPT)


def build_weather_agent(
    model: BaseChatModel | None = None,
    *,
    settings: ModelsSettings | None = None,
) -> Any:
    """Agent with the three weather tools."""
    llm = _model(model, ChatTuning(temperature=0.3, max_tokens=1000), settings)
    return build_agent(llm, tools=WEATHER_TOOLS, system_prompt=WEATHER_PROMPT)


def build_middleware_agent(
    model: BaseChatModel | None = None,
    *,
    settings: ModelsSettings | None = None,
    middleware: Sequence[Any] | None = None,
) -> Any:
    """Calculator agent with ConsoleLoggerMiddleware attached."""
    llm = _model(model, ChatTuning(temperature=0.3, max_tokens=800), settings)
    if middleware is None:
        middleware = [ConsoleLoggerMiddleware()]
    return build_agent(
        llm,
        tools=[calculator],
        system_prompt=MIDDLEWARE_PROMPT,
        middleware=middleware,
    )


def ask(agent: Any, *questions: str) -> dict[str, Any]:
    """Invoke ``agent`` with one or more user messages in a single turn."""
    from langchain_core.messages import HumanMessage

    return agent.invoke({"messages": [HumanMessage(q) for q in questions]})


def last_reply(result: dict[str, Any]) -> str:
    """Text of the final message of an agent result."""
    messages = result.get("messages") or []
    if not messages:
        return ""
    return message_text(messages[-1])
