"""Debounce controller: the single pending intrusion notification.

A trigger schedules the notification after a delay; another trigger
replaces it (the fire time resets to now + delay) and a stop cancels it.
All handle mutation happens synchronously inside one event-loop turn, so
at most one notification is ever scheduled.
"""

import asyncio
import sys
from dataclasses import dataclass
from typing import Optional, Set

from home_alarm.ports.outbound import NotificationPort, SchedulerPort, TimerHandle

TRIGGERED = "triggered"
RETRIGGERED = "re-triggered"
STOPPED = "stopped"
NOT_TRIGGERED = "was not triggered"


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class PendingNotification:
    delay: float
    message: str
    due_at: float
    handle: Optional[TimerHandle] = None


class DebounceController:
    """Owns the one scheduled notification: trigger, re-trigger, stop, fire."""

    def __init__(
        self,
        notifier: NotificationPort,
        destination: str,
        scheduler: Optional[SchedulerPort] = None,
    ):
        self._notifier = notifier
        self._destination = destination
        self._scheduler = scheduler
        self._pending: Optional[PendingNotification] = None
        self._in_flight: Set[asyncio.Task] = set()

    def _get_scheduler(self) -> SchedulerPort:
        # Falls back to the loop serving the current request.
        return self._scheduler or asyncio.get_running_loop()

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def pending(self) -> Optional[PendingNotification]:
        return self._pending

    def fires_in(self) -> Optional[float]:
        """Seconds until the pending notification fires, or None when idle."""
        if self._pending is None:
            return None
        remaining = self._pending.due_at - self._get_scheduler().time()
        return max(remaining, 0.0)

    def trigger(self, delay: float, message: str) -> str:
        """Schedule the notification, replacing any pending one."""
        scheduler = self._get_scheduler()
        outcome = TRIGGERED
        if self._pending is not None:
            self._pending.handle.cancel()
            self._pending = None
            outcome = RETRIGGERED
            _log("[DebounceController] alarm re-triggered while it was already triggered")

        pending = PendingNotification(
            delay=delay,
            message=message,
            due_at=scheduler.time() + delay,
        )
        pending.handle = scheduler.call_later(delay, self._fire, pending)
        self._pending = pending
        _log(f"[DebounceController] alarm {outcome}, notifying in {delay:.3f}s")
        return outcome

    def stop(self) -> str:
        """Cancel the pending notification. Idempotent."""
        if self._pending is None:
            _log("[DebounceController] alarm was not triggered")
            return NOT_TRIGGERED

        self._pending.handle.cancel()
        self._pending = None
        _log("[DebounceController] alarm stopped")
        return STOPPED

    cancel = stop

    def _fire(self, pending: PendingNotification):
        if self._pending is not pending:
            # Replaced or stopped after the loop already queued this callback.
            return
        self._pending = None
        _log("[DebounceController] trigger delay elapsed, sending notification")

        task = asyncio.ensure_future(self._deliver(pending.message))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _deliver(self, message: str):
        try:
            result = await self._notifier.notify(self._destination, message)
        except Exception as e:
            _log(f"[DebounceController] notifier raised: {e}")
            return
        if not result.success:
            _log(f"[DebounceController] notification not delivered: {result.error}")

    async def drain(self):
        """Wait for notifications that already fired to finish sending."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def aclose(self):
        """Drop the pending notification and wait for in-flight sends."""
        if self._pending is not None:
            self._pending.handle.cancel()
            self._pending = None
            _log("[DebounceController] pending notification dropped on shutdown")
        await self.drain()
