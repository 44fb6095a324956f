# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import re
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constant import (
    DEFAULT_BACKEND,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL_NAME,
)

# Keys a response must carry to be taken as a configuration document.
_DOCUMENT_KEYS = frozenset({"apiKey", "modelName"})


class BackendConf(BaseModel):
    """Backend-specific connection settings."""

    url: str = ""


class ChatGPTConfig(BaseModel):
    """The persisted configuration document (camelCase on the wire).

    ``max_tokens`` keeps whatever the operator typed; it is only parsed
    when the document is validated for saving.
    """

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    api_key: str = Field(default="", alias="apiKey")
    model_name: str = Field(default=DEFAULT_MODEL_NAME, alias="modelName")
    backend: str = Field(default=DEFAULT_BACKEND)
    backend_conf: BackendConf = Field(
        default_factory=BackendConf,
        alias="backendConf",
    )
    max_tokens: Union[int, str] = Field(
        default=DEFAULT_MAX_TOKENS,
        alias="maxTokens",
    )

    # Documents stored before backends existed carry no backend fields.
    @field_validator("backend", mode="before")
    @classmethod
    def _default_backend(cls, value: Any) -> Any:
        return DEFAULT_BACKEND if value is None else value

    @field_validator("backend_conf", mode="before")
    @classmethod
    def _default_backend_conf(cls, value: Any) -> Any:
        return BackendConf() if value is None else value

    def to_payload(self) -> dict:
        """Return the wire representation."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_payload(cls, data: Any) -> Optional["ChatGPTConfig"]:
        """Build a document from a server response.

        Accepts the document itself or a ``{"value": "<json>"}`` wrapper.
        Returns ``None`` when the response carries no document. Raises
        ``ValueError`` when a document is present but malformed.
        """
        if isinstance(data, dict) and isinstance(data.get("value"), str):
            data = json.loads(data["value"])
        if not isinstance(data, dict) or not _DOCUMENT_KEYS <= data.keys():
            return None
        return cls.model_validate(data)


def parse_max_tokens(value: Any) -> Optional[int]:
    """Return *value* as a positive int, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r"[0-9]+", text):
            return None
        number = int(text)
        return number if number > 0 else None
    return None
