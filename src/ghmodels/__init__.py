"""ghmodels: GitHub Models clients and small agent examples.

Builds connection options, HTTP clients and langchain chat models for the
GitHub Models chat-completions endpoint, and checks that a token works.
"""

from ghmodels._version import __version__

# Configuration and errors
from ghmodels.exceptions import ConfigurationError, GHModelsError
from ghmodels.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    ModelsSettings,
)

# Client factory
from ghmodels.llm import (
    ChatTuning,
    ConnectionOptions,
    LLMAuthError,
    LLMClientError,
    LLMNotFoundError,
    LLMRateLimitError,
    LLMResponseError,
    ModelsClient,
    ProbeResult,
    build_connection_options,
    create_basic_client,
    create_tuned_client,
    probe_credential,
    validate_credential,
)

# Output
from ghmodels.formatting import print_rate_limit_notice

__all__ = [
    "__version__",
    # Configuration and errors
    "ModelsSettings",
    "DEFAULT_ENDPOINT",
    "DEFAULT_API_VERSION",
    "DEFAULT_MODEL",
    "GHModelsError",
    "ConfigurationError",
    "LLMClientError",
    "LLMAuthError",
    "LLMNotFoundError",
    "LLMRateLimitError",
    "LLMResponseError",
    # Client factory
    "ConnectionOptions",
    "build_connection_options",
    "ModelsClient",
    "create_basic_client",
    "ChatTuning",
    "create_tuned_client",
    "ProbeResult",
    "probe_credential",
    "validate_credential",
    # Output
    "print_rate_limit_notice",
]
