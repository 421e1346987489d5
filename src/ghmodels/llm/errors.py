"""LLM-specific error hierarchy.

All LLM errors inherit from GHModelsError for consistent exception handling.
"""

from __future__ import annotations

from ghmodels.exceptions import GHModelsError


class LLMClientError(GHModelsError):
    """Base for all LLM client errors.

    Attributes:
        status_code: HTTP status of the failed response, if any.
        body: Raw response body text, if any.
    """

    def __init__(
        self,
        message: str = "LLM request failed",
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class LLMRateLimitError(LLMClientError):
    """Rate limited by the API (429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header),
            or None if not provided.
    """

    def __init__(
        self,
        message: str = "Rate limited",
        retry_after: float | None = None,
        *,
        body: str | None = None,
    ) -> None:
        self.retry_after = retry_after
        if retry_after is not None:
            message = f"{message} (retry after {retry_after}s)"
        super().__init__(message, status_code=429, body=body)


class LLMAuthError(LLMClientError):
    """Authentication failed (401/403)."""


class LLMNotFoundError(LLMClientError):
    """Endpoint or model not found (404).

    On GitHub Models this usually means preview access is not enabled or the
    model is not available for the account.
    """


class LLMResponseError(LLMClientError):
    """Unexpected response format from LLM API."""
