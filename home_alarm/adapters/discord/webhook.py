"""Discord webhook notifier using aiohttp."""

import asyncio
import sys

import aiohttp

from home_alarm.config import DEFAULT_NOTIFY_TIMEOUT_SECONDS
from home_alarm.domain.errors import DeliveryError
from home_alarm.ports.outbound import NotifyResult

DISCORD_CONTENT_LIMIT = 2000


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordWebhookNotifier:
    """NotificationPort implementation posting {"content": ...} to a webhook URL."""

    def __init__(self, timeout_seconds: float = DEFAULT_NOTIFY_TIMEOUT_SECONDS):
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @staticmethod
    def truncate_text(text: str, limit: int = DISCORD_CONTENT_LIMIT) -> str:
        if len(text) <= limit:
            return text
        return text[: limit - 3] + "..."

    async def _post(self, destination: str, message: str) -> int:
        if not destination:
            raise DeliveryError("webhook URL not configured")

        payload = {"content": self.truncate_text(message)}
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            async with session.post(destination, json=payload) as resp:
                if not 200 <= resp.status < 300:
                    raise DeliveryError(f"webhook returned status {resp.status}", status=resp.status)
                return resp.status

    async def notify(self, destination: str, message: str) -> NotifyResult:
        try:
            status = await self._post(destination, message)
        except DeliveryError as e:
            _log(f"[DiscordWebhook] error sending notification: {e}")
            return NotifyResult(success=False, status=e.status, error=str(e))
        except asyncio.TimeoutError:
            _log("[DiscordWebhook] error sending notification: timed out")
            return NotifyResult(success=False, error="timeout")
        except aiohttp.ClientError as e:
            _log(f"[DiscordWebhook] error sending notification: {e}")
            return NotifyResult(success=False, error=str(e) or type(e).__name__)
        except Exception as e:
            _log(f"[DiscordWebhook] unexpected error sending notification: {e}")
            return NotifyResult(success=False, error=str(e) or type(e).__name__)
        _log("[DiscordWebhook] notification sent")
        return NotifyResult(success=True, status=status)
