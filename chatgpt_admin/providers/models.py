# -*- coding: utf-8 -*-
"""Pydantic data models for providers and models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelOption(BaseModel):
    """A single model offered by a provider."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Model identifier used in API calls")
    label: str = Field(default="", description="Human-readable description")


class ProviderDescriptor(BaseModel):
    """Static definition of a completion backend."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    custom_url_allowed: bool = Field(
        default=False,
        description="Whether the operator can set a custom endpoint URL",
    )
    custom_url_required: bool = Field(
        default=False,
        description="Whether an endpoint URL must be entered before saving",
    )
    default_url: Optional[str] = Field(
        default=None,
        description="Default API endpoint",
    )
    default_models: List[ModelOption] = Field(
        default_factory=list,
        description="Built-in model list",
    )
    require_custom_model_name: bool = Field(
        default=False,
        description="Model name is typed freely instead of picked",
    )

    @model_validator(mode="after")
    def _check_url_flags(self) -> "ProviderDescriptor":
        if self.custom_url_required and not self.custom_url_allowed:
            raise ValueError(
                f"provider '{self.id}' requires a custom URL "
                "but does not allow one",
            )
        return self


class DefaultProviderConfig(BaseModel):
    """Values a provider suggests for a fresh configuration."""

    model_config = ConfigDict(protected_namespaces=())

    url: str = ""
    model_name: str = ""
