"""Configuration loaded from the environment (and .env)."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PORT = 3000
DEFAULT_TRIGGER_DELAY_MS = 30000
DEFAULT_NOTIFY_TIMEOUT_SECONDS = 10.0

ACTIVATED_MESSAGE = "Activated 🔑"
INTRUDER_MESSAGE = "🚨 Intruder detected! 🚨"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


@dataclass
class AppConfig:
    """Typed configuration for the alarm relay."""

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    token: str = ""
    trigger_delay_ms: int = DEFAULT_TRIGGER_DELAY_MS
    discord_webhook_activated: str = ""
    discord_webhook_trigger: str = ""
    notify_timeout_seconds: float = DEFAULT_NOTIFY_TIMEOUT_SECONDS
    activated_message: str = ACTIVATED_MESSAGE
    intruder_message: str = INTRUDER_MESSAGE

    @property
    def trigger_delay_seconds(self) -> float:
        return self.trigger_delay_ms / 1000

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        trigger_delay_ms = _env_int("TRIGGER_DELAY", DEFAULT_TRIGGER_DELAY_MS)
        if trigger_delay_ms < 0:
            _stderr_print(
                f"Negative TRIGGER_DELAY={trigger_delay_ms}, "
                f"falling back to {DEFAULT_TRIGGER_DELAY_MS}"
            )
            trigger_delay_ms = DEFAULT_TRIGGER_DELAY_MS

        return cls(
            port=_env_int("PORT", DEFAULT_PORT),
            host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
            token=os.getenv("TOKEN", ""),
            trigger_delay_ms=trigger_delay_ms,
            discord_webhook_activated=os.getenv("DISCORD_WEBHOOK_ACTIVATED", "").strip(),
            discord_webhook_trigger=os.getenv("DISCORD_WEBHOOK_TRIGGER", "").strip(),
            notify_timeout_seconds=_env_float(
                "NOTIFY_TIMEOUT_SECONDS", DEFAULT_NOTIFY_TIMEOUT_SECONDS
            ),
        )
