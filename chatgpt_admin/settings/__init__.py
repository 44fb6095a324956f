# -*- coding: utf-8 -*-
"""Configuration session — client, errors + session."""

from .client import ConfigClient
from .errors import (
    AlreadyInProgress,
    ConfigError,
    FetchError,
    SaveError,
    TransportFailed,
    ValidationFailed,
    ValidationReason,
)
from .session import (
    ConfigurationSession,
    FieldView,
    NotificationKind,
    Notifier,
    SessionState,
)

__all__ = [
    # client
    "ConfigClient",
    # errors
    "AlreadyInProgress",
    "ConfigError",
    "FetchError",
    "SaveError",
    "TransportFailed",
    "ValidationFailed",
    "ValidationReason",
    # session
    "ConfigurationSession",
    "FieldView",
    "NotificationKind",
    "Notifier",
    "SessionState",
]
