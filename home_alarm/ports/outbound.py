"""Outbound ports: interfaces for the notifier and the timer."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable


@dataclass
class NotifyResult:
    """Outcome of a single notification delivery."""

    success: bool
    status: Optional[int] = None
    error: Optional[str] = None


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for sending a text message to a notification sink."""

    async def notify(self, destination: str, message: str) -> NotifyResult: ...


@runtime_checkable
class TimerHandle(Protocol):
    """A cancellable scheduled callback. cancel() after firing is a no-op."""

    def cancel(self) -> None: ...


@runtime_checkable
class SchedulerPort(Protocol):
    """Subset of asyncio.AbstractEventLoop used for delayed callbacks."""

    def time(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...
