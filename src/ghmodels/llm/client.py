"""Built-in httpx client for the GitHub Models chat-completions endpoint.

Provides a sync HTTP client bound to one set of connection options. The
model header, ``api-version`` query parameter and bearer credential are
client defaults, so every request issued through it carries them.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import tenacity

from ghmodels.llm.errors import (
    LLMAuthError,
    LLMNotFoundError,
    LLMRateLimitError,
    LLMResponseError,
)
from ghmodels.llm.options import ConnectionOptions, build_connection_options
from ghmodels.settings import DEFAULT_MODEL, ModelsSettings

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}
_AUTH_ERROR_STATUS_CODES = {401, 403}


def _is_retryable(exc: BaseException) -> bool:
    """Check if an exception is retryable.

    Retryable: 429, 500, 502, 503, 504, connection errors.
    Not retryable: 401, 403, 404, other client errors.
    """
    if isinstance(exc, (LLMAuthError, LLMNotFoundError)):
        return False
    if isinstance(exc, LLMRateLimitError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in _RETRYABLE_STATUS_CODES
    return isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout))


class ModelsClient:
    """Sync httpx client for one model on the GitHub Models endpoint.

    ``chat()`` retries transient errors (429, 5xx, connection failures) with
    exponential backoff. ``chat_once()`` sends exactly one request.

    Usage::

        with create_basic_client("gpt-4o") as client:
            response = client.chat([{"role": "user", "content": "Hello"}])
            text = ModelsClient.extract_content(response)
    """

    def __init__(
        self,
        options: ConnectionOptions,
        *,
        timeout: float = 120.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            options: Connection options; see build_connection_options().
            timeout: Request timeout in seconds.
            max_retries: Maximum attempts for retryable errors in chat().
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self._options = options
        self._max_retries = max_retries
        self._client = httpx.Client(
            base_url=options.base_url,
            timeout=timeout,
            headers={
                "Content-Type": "application/json",
                **options.auth_headers,
                **options.default_headers,
            },
            params=options.default_query,
            transport=transport,
        )

    @property
    def options(self) -> ConnectionOptions:
        return self._options

    @property
    def model(self) -> str:
        return self._options.model

    def chat(
        self,
        messages: list[dict[str, str]],
        *,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> dict:
        """Send chat completion request with retry.

        Uses tenacity.Retrying programmatically (not as decorator) so that
        max_retries is configurable per-instance.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            model: Body ``model`` field. Falls back to the client's model.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens to generate.
            **kwargs: Additional payload parameters forwarded to the API.

        Returns:
            Full response dict with 'choices', 'usage', 'model', etc.

        Raises:
            LLMAuthError: On 401/403 (no retry).
            LLMNotFoundError: On 404 (no retry).
            LLMRateLimitError: On 429 after all retries exhausted.
            LLMResponseError: On unexpected response format.
            httpx.HTTPStatusError: On other non-retryable HTTP errors.
        """
        retryer = tenacity.Retrying(
            retry=tenacity.retry_if_exception(_is_retryable),
            wait=(
                tenacity.wait_exponential(multiplier=1, min=1, max=30)
                + tenacity.wait_random(0, 2)
            ),
            stop=tenacity.stop_after_attempt(self._max_retries),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retryer(
            self.chat_once,
            messages,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )

    def chat_once(
        self,
        messages: list[dict[str, str]],
        *,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> dict:
        """Execute a single chat completion request (no retry)."""
        payload: dict[str, Any] = {
            "model": model or self._options.model,
            "messages": messages,
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        payload.update(kwargs)

        response = self._client.post("/chat/completions", json=payload)

        if response.status_code in _AUTH_ERROR_STATUS_CODES:
            raise LLMAuthError(
                f"Authentication failed: HTTP {response.status_code} - "
                f"{response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        if response.status_code == 404:
            raise LLMNotFoundError(
                f"Not found: HTTP 404 - {response.text}",
                status_code=404,
                body=response.text,
            )

        if response.status_code == 429:
            retry_after_raw = response.headers.get("Retry-After")
            retry_after: float | None = None
            if retry_after_raw is not None:
                try:
                    retry_after = float(retry_after_raw)
                except (ValueError, TypeError):
                    pass
            raise LLMRateLimitError(
                f"Rate limited: HTTP 429 - {response.text}",
                retry_after=retry_after,
                body=response.text,
            )

        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMResponseError(
                f"Response is not valid JSON: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        if not isinstance(data, dict) or "choices" not in data:
            raise LLMResponseError(
                f"Unexpected response format: missing 'choices' key. "
                f"Response: {data}",
                status_code=response.status_code,
                body=response.text,
            )
        return data

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> ModelsClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @staticmethod
    def extract_content(response: dict) -> str:
        """Extract the assistant's message content from a response dict.

        Raises:
            LLMResponseError: If the response format is unexpected.
        """
        try:
            return response["choices"][0]["message"].get("content") or ""
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise LLMResponseError(
                f"Cannot extract content from response: {exc}. "
                f"Response: {response}"
            ) from exc

    @staticmethod
    def extract_usage(response: dict) -> dict | None:
        """Extract usage information (prompt/completion/total tokens), if present."""
        return response.get("usage")


def create_basic_client(
    model_name: str = DEFAULT_MODEL,
    *,
    settings: ModelsSettings | None = None,
    timeout: float = 120.0,
    max_retries: int = 3,
    transport: httpx.BaseTransport | None = None,
) -> ModelsClient:
    """Create a ModelsClient for ``model_name``.

    Raises:
        ConfigurationError: If the credential is missing.
    """
    options = build_connection_options(model_name, settings)
    return ModelsClient(
        options,
        timeout=timeout,
        max_retries=max_retries,
        transport=transport,
    )
