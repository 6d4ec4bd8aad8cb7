"""Alarm relay error types."""

from typing import Optional


class AuthError(Exception):
    """Inbound request carried a token that does not match the shared secret."""


class DeliveryError(Exception):
    """Outbound notification could not be delivered."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
