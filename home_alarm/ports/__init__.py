"""Port interfaces (Hexagonal Architecture)."""

from home_alarm.ports.outbound import NotificationPort, NotifyResult, SchedulerPort, TimerHandle

__all__ = [
    "NotificationPort",
    "NotifyResult",
    "SchedulerPort",
    "TimerHandle",
]
