# -*- coding: utf-8 -*-
"""Provider catalog — models + registry."""

from .models import (
    DefaultProviderConfig,
    ModelOption,
    ProviderDescriptor,
)
from .registry import (
    BUILTIN_PROVIDERS,
    PROVIDER_AZURE_AI,
    PROVIDER_OPEN_AI,
    ProviderRegistry,
    default_config_for,
    default_registry,
    model_values,
)

__all__ = [
    # models
    "DefaultProviderConfig",
    "ModelOption",
    "ProviderDescriptor",
    # registry
    "BUILTIN_PROVIDERS",
    "PROVIDER_AZURE_AI",
    "PROVIDER_OPEN_AI",
    "ProviderRegistry",
    "default_config_for",
    "default_registry",
    "model_values",
]
