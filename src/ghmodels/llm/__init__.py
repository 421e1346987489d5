"""LLM client infrastructure for ghmodels.

Provides the connection-options factory, an httpx client for the
chat-completions endpoint, a tuned langchain chat model and the credential
probe.
"""

from ghmodels.llm.chat import ChatTuning, create_tuned_client
from ghmodels.llm.client import ModelsClient, create_basic_client
from ghmodels.llm.errors import (
    LLMAuthError,
    LLMClientError,
    LLMNotFoundError,
    LLMRateLimitError,
    LLMResponseError,
)
from ghmodels.llm.options import ConnectionOptions, build_connection_options
from ghmodels.llm.probe import ProbeResult, probe_credential, validate_credential

__all__ = [
    "ConnectionOptions",
    "build_connection_options",
    "ModelsClient",
    "create_basic_client",
    "ChatTuning",
    "create_tuned_client",
    "ProbeResult",
    "probe_credential",
    "validate_credential",
    "LLMClientError",
    "LLMAuthError",
    "LLMNotFoundError",
    "LLMRateLimitError",
    "LLMResponseError",
]
