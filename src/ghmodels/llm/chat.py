"""Tuned chat model for agents.

create_tuned_client() returns a langchain ``ChatOpenAI`` pointed at the
GitHub Models endpoint, ready to hand to ``langchain.agents.create_agent``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from ghmodels.llm.options import build_connection_options
from ghmodels.settings import DEFAULT_MODEL, ModelsSettings

if TYPE_CHECKING:
    from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)

_ALIASES: dict[str, str] = {
    "maxTokens": "max_tokens",
    "max_completion_tokens": "max_tokens",
    "stream": "streaming",
}


@dataclass(frozen=True)
class ChatTuning:
    """Generation parameters applied to a tuned chat model.

    Example::

        tuning = ChatTuning(temperature=0.9)
        tuning.max_tokens  # 1000
    """

    temperature: float = 0.3
    max_tokens: int = 1000
    streaming: bool = False

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> ChatTuning:
        """Create ChatTuning from a mapping, ignoring unrecognized keys.

        Accepts camelCase ``maxTokens`` as well as ``max_tokens``. Keys whose
        value is None keep their default.
        """
        if not d:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in d.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unrecognized tuning key %r", key)
                continue
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)


def resolve_tuning(tuning: ChatTuning | Mapping[str, Any] | None) -> ChatTuning:
    """Normalize the accepted tuning inputs to a ChatTuning."""
    if isinstance(tuning, ChatTuning):
        return tuning
    return ChatTuning.from_dict(tuning)


def create_tuned_client(
    model_name: str = DEFAULT_MODEL,
    tuning: ChatTuning | Mapping[str, Any] | None = None,
    *,
    settings: ModelsSettings | None = None,
) -> ChatOpenAI:
    """Create a ChatOpenAI model for ``model_name`` on GitHub Models.

    Args:
        model_name: Model identifier (header and request body).
        tuning: ChatTuning, a mapping of tuning values, or None for defaults
            (temperature 0.3, max_tokens 1000, streaming off).
        settings: Endpoint settings. Falls back to ``ModelsSettings.from_env()``.

    Raises:
        ConfigurationError: If the credential is missing.
    """
    from langchain_openai import ChatOpenAI

    options = build_connection_options(model_name, settings)
    resolved = resolve_tuning(tuning)

    return ChatOpenAI(
        model=model_name,
        temperature=resolved.temperature,
        max_tokens=resolved.max_tokens,
        streaming=resolved.streaming,
        api_key=options.api_key,
        base_url=options.base_url,
        default_headers=options.default_headers,
        default_query=options.default_query,
    )
