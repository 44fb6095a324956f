# -*- coding: utf-8 -*-
"""Reading and writing the stored configuration (config.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import ChatGPTConfig
from ..constant import CONFIG_FILE, WORKING_DIR

logger = logging.getLogger(__name__)


def get_config_json_path() -> Path:
    """Return the default config.json path."""
    return WORKING_DIR / CONFIG_FILE


def load_config_json(path: Optional[Path] = None) -> ChatGPTConfig:
    """Load config.json; a missing or unreadable file yields defaults."""
    if path is None:
        path = get_config_json_path()

    if not path.is_file():
        return ChatGPTConfig()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        return ChatGPTConfig.model_validate(raw)
    except ValueError as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return ChatGPTConfig()


def save_config_json(
    config: ChatGPTConfig,
    path: Optional[Path] = None,
) -> None:
    """Write the configuration to config.json."""
    if path is None:
        path = get_config_json_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as fh:
        json.dump(config.to_payload(), fh, indent=2, ensure_ascii=False)


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
