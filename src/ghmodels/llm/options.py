"""Connection options for the GitHub Models chat-completions endpoint.

ConnectionOptions is the immutable bundle every client in this package is
built from: base URL, bearer credential, the model header and the
``api-version`` query parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ghmodels.exceptions import ConfigurationError
from ghmodels.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINT,
    TOKEN_ENV,
    ModelsSettings,
)

logger = logging.getLogger(__name__)

MODEL_HEADER = "x-ms-model-id"
API_VERSION_PARAM = "api-version"


@dataclass(frozen=True)
class ConnectionOptions:
    """Everything needed to talk to one model on the endpoint.

    Build with :func:`build_connection_options` rather than directly, so the
    credential check and defaults are applied.
    """

    base_url: str
    api_key: str
    model: str
    api_version: str

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent on every request (model selection)."""
        return {MODEL_HEADER: self.model}

    @property
    def default_query(self) -> dict[str, str]:
        """Query parameters sent on every request."""
        return {API_VERSION_PARAM: self.api_version}

    @property
    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def __repr__(self) -> str:
        return (
            f"ConnectionOptions(base_url={self.base_url!r}, api_key='***', "
            f"model={self.model!r}, api_version={self.api_version!r})"
        )


def build_connection_options(
    model_name: str,
    settings: ModelsSettings | None = None,
) -> ConnectionOptions:
    """Build connection options for ``model_name``.

    Args:
        model_name: Model identifier, sent in the ``x-ms-model-id`` header.
            Only checked for non-emptiness; the endpoint validates the rest.
        settings: Endpoint settings. Falls back to ``ModelsSettings.from_env()``.

    Returns:
        A fresh, immutable ConnectionOptions.

    Raises:
        ConfigurationError: If the credential is missing or the model name
            is empty. Raised before any network activity.
    """
    if settings is None:
        settings = ModelsSettings.from_env()

    if not settings.token:
        raise ConfigurationError(
            f"{TOKEN_ENV} is not set in environment variables.",
            variable=TOKEN_ENV,
        )
    if not model_name:
        raise ConfigurationError("Model name must be a non-empty string.")

    options = ConnectionOptions(
        base_url=settings.endpoint or DEFAULT_ENDPOINT,
        api_key=settings.token,
        model=model_name,
        api_version=settings.api_version or DEFAULT_API_VERSION,
    )
    logger.debug("Built connection options: %r", options)
    return options
