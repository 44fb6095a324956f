# -*- coding: utf-8 -*-
"""Built-in provider definitions and registry."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .models import DefaultProviderConfig, ModelOption, ProviderDescriptor

# ---------------------------------------------------------------------------
# Built-in model lists
# ---------------------------------------------------------------------------

OPENAI_MODELS: List[ModelOption] = [
    ModelOption(
        value="text-davinci-003",
        label="higher quality, longer output, better instruction following",
    ),
    ModelOption(
        value="text-curie-001",
        label="faster and lower cost, suited for Q&A, translation, "
        "service bot",
    ),
]

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_OPEN_AI = ProviderDescriptor(
    id="open_ai",
    name="Open AI",
    custom_url_allowed=True,
    custom_url_required=False,
    default_url="https://api.openai.com/v1",
    default_models=OPENAI_MODELS,
)

# Azure deployments carry their own model names.
PROVIDER_AZURE_AI = ProviderDescriptor(
    id="azure_ai",
    name="Azure AI",
    custom_url_allowed=True,
    custom_url_required=True,
    default_url="https://azure-endpoint-name.openai.azure.com/",
    default_models=[],
    require_custom_model_name=True,
)

BUILTIN_PROVIDERS: tuple[ProviderDescriptor, ...] = (
    PROVIDER_OPEN_AI,
    PROVIDER_AZURE_AI,
)


class ProviderRegistry:
    """Read-only catalog of providers, keyed by id."""

    def __init__(self, providers: Iterable[ProviderDescriptor]) -> None:
        self._providers: Dict[str, ProviderDescriptor] = {}
        for provider in providers:
            if provider.id in self._providers:
                raise ValueError(f"Duplicate provider id: {provider.id}")
            self._providers[provider.id] = provider

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def find_provider(self, provider_id: str) -> Optional[ProviderDescriptor]:
        """Return a provider definition by id, or None if not found."""
        return self._providers.get(provider_id)

    def list_providers(self) -> List[ProviderDescriptor]:
        """Return all registered provider definitions."""
        return list(self._providers.values())


def default_config_for(provider: ProviderDescriptor) -> DefaultProviderConfig:
    """Return the URL and model a provider suggests.

    The model is left empty when the provider has no built-in models or
    expects the operator to type the model name.
    """
    model_name = ""
    if provider.default_models and not provider.require_custom_model_name:
        model_name = provider.default_models[0].value
    return DefaultProviderConfig(
        url=provider.default_url or "",
        model_name=model_name,
    )


def model_values(provider: ProviderDescriptor) -> List[str]:
    """Return the identifiers of a provider's built-in models."""
    return [m.value for m in provider.default_models]


def default_registry() -> ProviderRegistry:
    """Return a registry over the built-in providers."""
    return ProviderRegistry(BUILTIN_PROVIDERS)
