"""Alarm API routes: activate, trigger, stop, status."""

import hmac
import sys
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from home_alarm.config import AppConfig
from home_alarm.domain.debounce import DebounceController
from home_alarm.domain.errors import AuthError
from home_alarm.ports.outbound import NotificationPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def require_token(request: Request, token: Optional[str] = None):
    """Reject the request unless ?token= matches the configured secret."""
    expected = request.app.state.config.token
    if not expected or token is None:
        raise AuthError("missing token")
    if not hmac.compare_digest(token.encode(), expected.encode()):
        raise AuthError("token mismatch")


alarm_router = APIRouter(prefix="/alarm", tags=["Alarm"], dependencies=[Depends(require_token)])


class AlarmStatusResponse(BaseModel):
    pending: bool
    fires_in_ms: Optional[int] = None
    trigger_delay_ms: int


async def send_activation(notifier: NotificationPort, config: AppConfig):
    """Background send of the activation message; outcome is only logged."""
    try:
        result = await notifier.notify(config.discord_webhook_activated, config.activated_message)
    except Exception as e:
        _log(f"[AlarmRoutes] activation notifier raised: {e}")
        return
    if not result.success:
        _log(f"[AlarmRoutes] activation notification not delivered: {result.error}")


@alarm_router.get("/activate", response_class=PlainTextResponse)
@alarm_router.post("/activate", response_class=PlainTextResponse)
async def activate(request: Request, background_tasks: BackgroundTasks):
    """Called when the alarm is armed on the keypad."""
    state = request.app.state
    background_tasks.add_task(send_activation, state.notifier, state.config)
    _log("[AlarmRoutes] alarm activated")
    return "Alarm activated"


@alarm_router.get("/trigger", response_class=PlainTextResponse)
@alarm_router.post("/trigger", response_class=PlainTextResponse)
async def trigger(request: Request):
    """Called when motion is detected while armed."""
    config: AppConfig = request.app.state.config
    controller: DebounceController = request.app.state.controller
    try:
        controller.trigger(config.trigger_delay_seconds, config.intruder_message)
    except Exception as e:
        _log(f"[AlarmRoutes] error triggering alarm: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    # Same body for first trigger and re-trigger.
    return "Alarm triggered"


@alarm_router.get("/stop", response_class=PlainTextResponse)
@alarm_router.post("/stop", response_class=PlainTextResponse)
async def stop(request: Request):
    """Called when the PIN is entered correctly."""
    controller: DebounceController = request.app.state.controller
    try:
        outcome = controller.stop()
    except Exception as e:
        _log(f"[AlarmRoutes] error stopping alarm: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return f"Alarm {outcome}"


@alarm_router.get("/status", response_model=AlarmStatusResponse)
async def status(request: Request):
    config: AppConfig = request.app.state.config
    controller: DebounceController = request.app.state.controller
    fires_in = controller.fires_in()
    return AlarmStatusResponse(
        pending=controller.is_pending,
        fires_in_ms=None if fires_in is None else int(fires_in * 1000),
        trigger_delay_ms=config.trigger_delay_ms,
    )
