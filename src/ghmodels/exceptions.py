"""ghmodels exception hierarchy.

All ghmodels-specific exceptions inherit from GHModelsError.
"""

from __future__ import annotations


class GHModelsError(Exception):
    """Base exception for all ghmodels errors."""


class ConfigurationError(GHModelsError):
    """Required configuration is missing or invalid.

    Raised while building connection options, before any request is sent.
    """

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        self.variable = variable
        super().__init__(message)
