"""Home Alarm Relay: HTTP alarm events to Discord webhook notifications."""

from home_alarm.config import AppConfig, __version__
from home_alarm.adapters.discord.webhook import DiscordWebhookNotifier
from home_alarm.adapters.web.server import create_app
from home_alarm.domain.debounce import DebounceController, PendingNotification
from home_alarm.domain.errors import AuthError, DeliveryError
from home_alarm.ports.outbound import NotificationPort, NotifyResult

__all__ = [
    "__version__",
    "AppConfig",
    "AuthError",
    "DebounceController",
    "DeliveryError",
    "DiscordWebhookNotifier",
    "NotificationPort",
    "NotifyResult",
    "PendingNotification",
    "create_app",
]
