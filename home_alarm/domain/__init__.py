"""Domain layer: pure Python, no framework dependencies."""

from home_alarm.domain.debounce import (
    NOT_TRIGGERED,
    RETRIGGERED,
    STOPPED,
    TRIGGERED,
    DebounceController,
    PendingNotification,
)
from home_alarm.domain.errors import AuthError, DeliveryError

__all__ = [
    "AuthError",
    "DebounceController",
    "DeliveryError",
    "NOT_TRIGGERED",
    "PendingNotification",
    "RETRIGGERED",
    "STOPPED",
    "TRIGGERED",
]
