"""Tests for settings and connection-option construction."""

from __future__ import annotations

import dataclasses

import pytest

from ghmodels import (
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINT,
    ConfigurationError,
    ConnectionOptions,
    GHModelsError,
    ModelsSettings,
    build_connection_options,
)


# ===========================================================================
# ModelsSettings
# ===========================================================================

class TestModelsSettings:

    def test_from_env_reads_all_three(self):
        settings = ModelsSettings.from_env({
            "GITHUB_MODELS_TOKEN": "tok",
            "GITHUB_MODELS_ENDPOINT": "https://example.test",
            "GITHUB_MODELS_API_VERSION": "2025-01-01",
        })
        assert settings == ModelsSettings(
            token="tok", endpoint="https://example.test", api_version="2025-01-01"
        )

    def test_from_env_missing_values_are_none(self):
        assert ModelsSettings.from_env({}) == ModelsSettings()

    def test_from_env_empty_strings_are_unset(self):
        settings = ModelsSettings.from_env({
            "GITHUB_MODELS_TOKEN": "",
            "GITHUB_MODELS_ENDPOINT": "",
        })
        assert settings.token is None
        assert settings.endpoint is None

    def test_from_env_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("GITHUB_MODELS_TOKEN", "from-os")
        assert ModelsSettings.from_env().token == "from-os"

    def test_repr_hides_token(self):
        assert "secret" not in repr(ModelsSettings(token="secret"))


# ===========================================================================
# build_connection_options
# ===========================================================================

class TestBuildConnectionOptions:

    def test_defaults_scenario(self):
        options = build_connection_options("gpt-4o", ModelsSettings(token="abc123"))
        assert options == ConnectionOptions(
            base_url="https://models.inference.ai.azure.com",
            api_key="abc123",
            model="gpt-4o",
            api_version="2024-02-15-preview",
        )

    def test_only_documented_defaults_applied(self, settings):
        options = build_connection_options("gpt-4o-mini", settings)
        assert options.base_url == DEFAULT_ENDPOINT
        assert options.api_version == DEFAULT_API_VERSION

    @pytest.mark.parametrize(
        "endpoint, version",
        [
            ("https://custom.example/v1/", None),
            (None, "2099-12-31-preview"),
            ("http://localhost:8080", "v2"),
        ],
    )
    def test_overrides_carried_verbatim(self, endpoint, version):
        settings = ModelsSettings(token="t", endpoint=endpoint, api_version=version)
        options = build_connection_options("gpt-4o", settings)
        assert options.base_url == (endpoint or DEFAULT_ENDPOINT)
        assert options.api_version == (version or DEFAULT_API_VERSION)

    @pytest.mark.parametrize(
        "settings",
        [
            ModelsSettings(),
            ModelsSettings(endpoint="https://x.test"),
            ModelsSettings(endpoint="https://x.test", api_version="v1"),
            ModelsSettings(token=""),
        ],
    )
    def test_missing_token_raises(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            build_connection_options("gpt-4o", settings)
        assert "GITHUB_MODELS_TOKEN" in str(exc_info.value)
        assert exc_info.value.variable == "GITHUB_MODELS_TOKEN"

    def test_missing_token_from_environment(self):
        # conftest clears the real environment variables
        with pytest.raises(ConfigurationError, match="GITHUB_MODELS_TOKEN"):
            build_connection_options("gpt-4o")

    def test_reads_environment_when_no_settings(self, monkeypatch):
        monkeypatch.setenv("GITHUB_MODELS_TOKEN", "env-token")
        monkeypatch.setenv("GITHUB_MODELS_API_VERSION", "env-version")
        options = build_connection_options("gpt-4o")
        assert options.api_key == "env-token"
        assert options.api_version == "env-version"
        assert options.base_url == DEFAULT_ENDPOINT

    def test_empty_model_name_raises(self, settings):
        with pytest.raises(ConfigurationError):
            build_connection_options("", settings)

    def test_configuration_error_is_ghmodels_error(self):
        assert issubclass(ConfigurationError, GHModelsError)


class TestConnectionOptions:

    def test_headers_and_query(self, settings):
        options = build_connection_options("Phi-3-mini", settings)
        assert options.default_headers == {"x-ms-model-id": "Phi-3-mini"}
        assert options.default_query == {"api-version": DEFAULT_API_VERSION}
        assert options.auth_headers == {"Authorization": "Bearer abc123"}

    def test_immutable(self, settings):
        options = build_connection_options("gpt-4o", settings)
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.api_key = "other"

    def test_fresh_instance_per_call(self, settings):
        first = build_connection_options("gpt-4o", settings)
        second = build_connection_options("gpt-4o", settings)
        assert first == second
        assert first is not second

    def test_repr_hides_key(self, settings):
        assert "abc123" not in repr(build_connection_options("gpt-4o", settings))
