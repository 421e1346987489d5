"""Credential probe.

Sends one minimal chat completion to confirm the token and endpoint work.
The probe is advisory: every failure is logged and folded into the returned
ProbeResult, nothing is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ghmodels.llm.client import create_basic_client
from ghmodels.llm.errors import LLMClientError
from ghmodels.settings import DEFAULT_MODEL, ModelsSettings

logger = logging.getLogger(__name__)

PROBE_PROMPT = "test"
PROBE_MAX_TOKENS = 5

NOT_FOUND_HINT = (
    "404 received. Check that GitHub Models preview access is enabled "
    "and that the requested model is available for your account."
)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a credential probe.

    Truthiness follows ``ok`` so simple call sites can write
    ``if probe_credential(): ...``.
    """

    ok: bool
    status_code: int | None = None
    detail: str | None = None
    error: str | None = None
    hint: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, status_code: int | None = 200) -> ProbeResult:
        return cls(ok=True, status_code=status_code)

    @classmethod
    def failure(cls, exc: BaseException) -> ProbeResult:
        """Build a failed result from whatever the probe raised."""
        status_code: int | None = None
        detail: str | None = None
        if isinstance(exc, LLMClientError):
            status_code = exc.status_code
            detail = exc.body
        elif isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            detail = exc.response.text
        return cls(
            ok=False,
            status_code=status_code,
            detail=detail or None,
            error=str(exc) or type(exc).__name__,
            hint=NOT_FOUND_HINT if status_code == 404 else None,
        )


def probe_credential(
    settings: ModelsSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> ProbeResult:
    """Send one minimal request and report whether it succeeded.

    Always targets the default model (gpt-4o), whatever model the caller
    intends to use later. Single attempt, no retry.

    Args:
        settings: Endpoint settings. Falls back to ``ModelsSettings.from_env()``.
        transport: Optional httpx transport, for tests.

    Returns:
        ProbeResult. Never raises for request or configuration failures.
    """
    try:
        with create_basic_client(
            DEFAULT_MODEL, settings=settings, transport=transport
        ) as client:
            client.chat_once(
                [{"role": "user", "content": PROBE_PROMPT}],
                model=DEFAULT_MODEL,
                max_tokens=PROBE_MAX_TOKENS,
            )
    except Exception as exc:
        result = ProbeResult.failure(exc)
        _log_failure(result)
        return result
    return ProbeResult.success()


def validate_credential(
    settings: ModelsSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> bool:
    """Return True if the credential and endpoint answered a probe request."""
    return probe_credential(settings, transport=transport).ok


def _log_failure(result: ProbeResult) -> None:
    logger.error("Error validating GitHub Models token: %s", result.error)
    if result.status_code is not None:
        logger.error("Status: %s", result.status_code)
    if result.detail:
        logger.error("Details: %s", result.detail)
    if result.hint:
        logger.error(result.hint)
