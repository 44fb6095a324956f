# -*- coding: utf-8 -*-
"""Errors raised by the configuration session."""

from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    MISSING_API_KEY = "missing_api_key"
    UNKNOWN_BACKEND = "unknown_backend"
    MISSING_BACKEND_URL = "missing_backend_url"
    INVALID_MODEL_NAME = "invalid_model_name"
    INVALID_MAX_TOKENS = "invalid_max_tokens"


class ConfigError(Exception):
    """Base class for configuration session errors."""


class FetchError(ConfigError):
    """The persisted configuration could not be read."""


class SaveError(ConfigError):
    """The configuration could not be saved."""


class ValidationFailed(SaveError):
    """The document was rejected before any request was made."""

    def __init__(self, reason: ValidationReason, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason.value)


class TransportFailed(SaveError):
    """The write endpoint could not be reached or answered with an error."""


class AlreadyInProgress(SaveError):
    """A save was requested while another one is still running."""
