# -*- coding: utf-8 -*-
"""API routes for the stored ChatGPT configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field

from ...config import ChatGPTConfig, parse_max_tokens
from ..store import load_config_json, save_config_json

router = APIRouter(prefix="/strapi-chatgpt/config", tags=["config"])


class StoredValue(BaseModel):
    """Response of the write endpoint: the stored document, serialized."""

    value: str = Field(..., description="JSON-encoded configuration")


def get_config_path() -> Optional[Path]:
    """Dependency returning the config.json location (None = default)."""
    return None


@router.get(
    "",
    summary="Get the ChatGPT configuration",
)
async def get_config(
    path: Optional[Path] = Depends(get_config_path),
) -> dict:
    """Return the stored configuration document."""
    return load_config_json(path).to_payload()


@router.post(
    "/update",
    response_model=StoredValue,
    summary="Replace the ChatGPT configuration",
    description="Store the full document and echo it back serialized.",
)
async def update_config(
    body: ChatGPTConfig = Body(..., description="Full configuration"),
    path: Optional[Path] = Depends(get_config_path),
) -> StoredValue:
    """Store the configuration; ``maxTokens`` is normalized to an int."""
    max_tokens = parse_max_tokens(body.max_tokens)
    if max_tokens is None:
        raise HTTPException(
            status_code=400,
            detail="maxTokens must be a positive integer",
        )
    config = body.model_copy(update={"max_tokens": max_tokens})
    save_config_json(config, path)
    return StoredValue(
        value=json.dumps(config.to_payload(), ensure_ascii=False),
    )
