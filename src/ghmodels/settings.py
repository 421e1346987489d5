"""Settings for the GitHub Models endpoint.

ModelsSettings is an explicit, immutable snapshot of the three values that
configure the endpoint. Build it from any mapping (``os.environ`` by default)
so callers and tests never need to touch process state.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

TOKEN_ENV = "GITHUB_MODELS_TOKEN"
ENDPOINT_ENV = "GITHUB_MODELS_ENDPOINT"
API_VERSION_ENV = "GITHUB_MODELS_API_VERSION"

DEFAULT_ENDPOINT = "https://models.inference.ai.azure.com"
DEFAULT_API_VERSION = "2024-02-15-preview"
DEFAULT_MODEL = "gpt-4o"


@dataclass(frozen=True)
class ModelsSettings:
    """Raw endpoint configuration.

    All fields are optional here; ``None`` means 'not set'. Defaults and the
    required-credential check are applied when connection options are built.

    Example::

        settings = ModelsSettings(token="ghp_...", api_version="2024-05-01-preview")
    """

    token: str | None = None
    endpoint: str | None = None
    api_version: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ModelsSettings:
        """Read settings from an environment mapping.

        Args:
            environ: Mapping to read from. Falls back to ``os.environ``.

        Empty strings are treated as unset.
        """
        env = os.environ if environ is None else environ
        return cls(
            token=env.get(TOKEN_ENV) or None,
            endpoint=env.get(ENDPOINT_ENV) or None,
            api_version=env.get(API_VERSION_ENV) or None,
        )

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"ModelsSettings(token={token!r}, endpoint={self.endpoint!r}, "
            f"api_version={self.api_version!r})"
        )
