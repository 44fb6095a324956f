"""Tests for the provider registry."""

import pytest
from pydantic import ValidationError

from chatgpt_admin.providers import (
    PROVIDER_AZURE_AI,
    PROVIDER_OPEN_AI,
    ModelOption,
    ProviderDescriptor,
    ProviderRegistry,
    default_config_for,
    default_registry,
    model_values,
)

pytestmark = pytest.mark.unit


class TestBuiltinCatalog:
    def test_contains_open_ai_and_azure(self) -> None:
        registry = default_registry()
        assert [p.id for p in registry.list_providers()] == [
            "open_ai",
            "azure_ai",
        ]

    def test_open_ai_models(self) -> None:
        assert model_values(PROVIDER_OPEN_AI) == [
            "text-davinci-003",
            "text-curie-001",
        ]
        assert PROVIDER_OPEN_AI.custom_url_required is False

    def test_azure_requires_url_and_model_name(self) -> None:
        assert PROVIDER_AZURE_AI.custom_url_allowed is True
        assert PROVIDER_AZURE_AI.custom_url_required is True
        assert PROVIDER_AZURE_AI.require_custom_model_name is True
        assert PROVIDER_AZURE_AI.default_models == []


class TestFindProvider:
    def test_known_id(self) -> None:
        assert default_registry().find_provider("open_ai") is PROVIDER_OPEN_AI

    @pytest.mark.parametrize("provider_id", ["", "Open AI", "anthropic"])
    def test_unknown_id_returns_none(self, provider_id: str) -> None:
        registry = default_registry()
        assert registry.find_provider(provider_id) is None
        assert provider_id not in registry

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate provider id"):
            ProviderRegistry([PROVIDER_OPEN_AI, PROVIDER_OPEN_AI])


class TestDefaultConfigFor:
    def test_first_model_and_default_url(self) -> None:
        defaults = default_config_for(PROVIDER_OPEN_AI)
        assert defaults.url == "https://api.openai.com/v1"
        assert defaults.model_name == "text-davinci-003"

    def test_custom_model_provider_has_no_model(self) -> None:
        defaults = default_config_for(PROVIDER_AZURE_AI)
        assert defaults.url == "https://azure-endpoint-name.openai.azure.com/"
        assert defaults.model_name == ""

    def test_custom_model_flag_hides_builtin_models(self) -> None:
        provider = ProviderDescriptor(
            id="hybrid",
            name="Hybrid",
            default_models=[ModelOption(value="m1", label="one")],
            require_custom_model_name=True,
        )
        assert default_config_for(provider).model_name == ""

    def test_no_default_url(self) -> None:
        provider = ProviderDescriptor(id="bare", name="Bare")
        assert default_config_for(provider).url == ""


class TestProviderDescriptor:
    def test_required_url_must_be_allowed(self) -> None:
        with pytest.raises(ValidationError):
            ProviderDescriptor(
                id="broken",
                name="Broken",
                custom_url_allowed=False,
                custom_url_required=True,
            )

    def test_is_immutable(self) -> None:
        with pytest.raises(ValidationError):
            PROVIDER_OPEN_AI.name = "Other"
