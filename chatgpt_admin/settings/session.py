# -*- coding: utf-8 -*-
"""Configuration session: the live document, its edits and load/save."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, List, Optional

import httpx
from pydantic import BaseModel, Field

from ..config import ChatGPTConfig, parse_max_tokens
from ..providers import (
    ProviderRegistry,
    default_config_for,
    default_registry,
    model_values,
)
from .client import ConfigClient
from .errors import (
    AlreadyInProgress,
    FetchError,
    TransportFailed,
    ValidationFailed,
    ValidationReason,
)

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"


Notifier = Callable[[NotificationKind, str], None]


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


FETCH_ERROR_MESSAGE = "Error while fetching the chatGPT configurations"
SAVE_ERROR_MESSAGE = "Error while saving the chatGPT configurations"
SAVE_SUCCESS_MESSAGE = "ChatGPT configurations saved successfully"
SAVE_BUSY_MESSAGE = "The chatGPT configurations are already being saved"

VALIDATION_MESSAGES = {
    ValidationReason.MISSING_API_KEY: "Please enter the api key",
    ValidationReason.UNKNOWN_BACKEND: "Please select a known backend",
    ValidationReason.MISSING_BACKEND_URL: "Please enter the backend url",
    ValidationReason.INVALID_MODEL_NAME: "Please select a valid model",
    ValidationReason.INVALID_MAX_TOKENS: (
        "Max tokens must be a positive integer"
    ),
}

# Editable scalar fields, by python name and by wire name.
_FIELD_ALIASES = {
    "api_key": "api_key",
    "apiKey": "api_key",
    "model_name": "model_name",
    "modelName": "model_name",
    "max_tokens": "max_tokens",
    "maxTokens": "max_tokens",
    "url": "url",
    "backendConf.url": "url",
}


class FieldView(BaseModel):
    """What the presentation layer needs to render one editable field."""

    name: str
    label: str
    value: Any = None
    required: bool = False
    enabled: bool = True
    choices: Optional[List[str]] = Field(
        default=None,
        description="Allowed values when the field is a closed set",
    )
    placeholder: str = ""
    on_edit: Callable[[Any], Any] = Field(exclude=True)


def _log_notification(kind: NotificationKind, message: str) -> None:
    logger.info("[%s] %s", kind.value, message)


class ConfigurationSession:
    """Holds the live configuration document for one operator session.

    ``initialize`` and ``save`` talk to the remote endpoint; the other
    operations only touch the in-memory document. Every failure is
    reported once through *notify* as a warning and every successful save
    once as a success.
    """

    def __init__(
        self,
        client: ConfigClient,
        registry: Optional[ProviderRegistry] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.client = client
        if registry is None:
            registry = default_registry()
        self.registry = registry
        self._notify = notify or _log_notification
        self.document = ChatGPTConfig()
        self.state = SessionState.UNINITIALIZED
        self.saving = False

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    async def initialize(self) -> ChatGPTConfig:
        """Load the persisted document.

        On failure the default document is kept, a warning is emitted and
        ``FetchError`` is raised; the session is usable either way.
        """
        self.state = SessionState.INITIALIZING
        try:
            data = await self.client.fetch()
            document = ChatGPTConfig.from_payload(data)
            if document is None:
                raise ValueError("response carries no configuration")
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Fetching configuration failed: %s", exc)
            self.state = SessionState.READY
            self._notify(NotificationKind.WARNING, FETCH_ERROR_MESSAGE)
            raise FetchError(str(exc)) from exc

        self.document = document
        self.state = SessionState.READY
        return self.document

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def set_backend(self, provider_id: str) -> ChatGPTConfig:
        """Switch backend, filling an empty URL from the provider default.

        Unknown providers only change ``backend``. The model name is
        never touched.
        """
        self.document.backend = provider_id
        provider = self.registry.find_provider(provider_id)
        if provider is None:
            logger.debug("Unknown backend selected: %s", provider_id)
            return self.document
        # A required URL has no usable default, only a placeholder.
        conf = self.document.backend_conf
        if not conf.url and not provider.custom_url_required:
            conf.url = default_config_for(provider).url
        return self.document

    def set_field(self, name: str, value: Any) -> ChatGPTConfig:
        """Store a raw edited value for an editable scalar field."""
        try:
            field = _FIELD_ALIASES[name]
        except KeyError:
            raise KeyError(f"Not an editable field: {name}") from None
        if field == "url":
            self.document.backend_conf.url = value
        else:
            setattr(self.document, field, value)
        return self.document

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> ChatGPTConfig:
        """Check the live document; return the normalized copy to submit.

        Raises ``ValidationFailed`` carrying the first failing rule.
        """
        doc = self.document
        if not doc.api_key:
            raise self._invalid(ValidationReason.MISSING_API_KEY)

        provider = self.registry.find_provider(doc.backend)
        if provider is None:
            raise self._invalid(ValidationReason.UNKNOWN_BACKEND)

        if provider.custom_url_required and not doc.backend_conf.url:
            raise self._invalid(ValidationReason.MISSING_BACKEND_URL)

        if provider.require_custom_model_name:
            if not doc.model_name:
                raise self._invalid(ValidationReason.INVALID_MODEL_NAME)
        elif doc.model_name not in model_values(provider):
            raise self._invalid(ValidationReason.INVALID_MODEL_NAME)

        max_tokens = parse_max_tokens(doc.max_tokens)
        if max_tokens is None:
            raise self._invalid(ValidationReason.INVALID_MAX_TOKENS)

        return doc.model_copy(update={"max_tokens": max_tokens}, deep=True)

    @staticmethod
    def _invalid(reason: ValidationReason) -> ValidationFailed:
        return ValidationFailed(reason, VALIDATION_MESSAGES[reason])

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    async def save(self) -> ChatGPTConfig:
        """Validate and submit the whole document.

        The server's answer replaces the live document when it carries
        one; edits made while the request was in flight are lost then.
        """
        if self.saving:
            self._notify(NotificationKind.WARNING, SAVE_BUSY_MESSAGE)
            raise AlreadyInProgress(SAVE_BUSY_MESSAGE)

        try:
            submitted = self.validate()
        except ValidationFailed as exc:
            logger.info("Configuration rejected: %s", exc.reason.value)
            self._notify(NotificationKind.WARNING, str(exc))
            raise

        self.saving = True
        try:
            response = await self.client.update(submitted.to_payload())
        except httpx.HTTPError as exc:
            logger.warning("Saving configuration failed: %s", exc)
            self._notify(NotificationKind.WARNING, SAVE_ERROR_MESSAGE)
            raise TransportFailed(str(exc)) from exc
        finally:
            self.saving = False

        canonical = self._canonical(response)
        self.document = canonical if canonical is not None else submitted
        self._notify(NotificationKind.SUCCESS, SAVE_SUCCESS_MESSAGE)
        return self.document

    @staticmethod
    def _canonical(response: Any) -> Optional[ChatGPTConfig]:
        try:
            return ChatGPTConfig.from_payload(response)
        except ValueError as exc:
            logger.warning(
                "Ignoring malformed configuration in save response: %s",
                exc,
            )
            return None

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def fields(self) -> List[FieldView]:
        """Describe the editable fields for the current backend."""
        doc = self.document
        provider = self.registry.find_provider(doc.backend)

        if provider is None or provider.require_custom_model_name:
            model_choices = None
        else:
            model_choices = model_values(provider)

        return [
            FieldView(
                name="backend",
                label="Backend",
                value=doc.backend,
                required=True,
                choices=[p.id for p in self.registry.list_providers()],
                on_edit=self.set_backend,
            ),
            FieldView(
                name="api_key",
                label="API Key",
                value=doc.api_key,
                required=True,
                placeholder="sk-" + "x" * 48,
                on_edit=lambda v: self.set_field("api_key", v),
            ),
            FieldView(
                name="url",
                label="Backend URL",
                value=doc.backend_conf.url,
                required=bool(provider and provider.custom_url_required),
                enabled=bool(provider and provider.custom_url_allowed),
                placeholder=(provider.default_url or "") if provider else "",
                on_edit=lambda v: self.set_field("url", v),
            ),
            FieldView(
                name="model_name",
                label="Model Name",
                value=doc.model_name,
                required=True,
                choices=model_choices,
                on_edit=lambda v: self.set_field("model_name", v),
            ),
            FieldView(
                name="max_tokens",
                label="Max Tokens",
                value=doc.max_tokens,
                required=True,
                placeholder="2048",
                on_edit=lambda v: self.set_field("max_tokens", v),
            ),
        ]
