"""FastAPI application factory, access log, and lifecycle."""

import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from home_alarm.adapters.discord.webhook import DiscordWebhookNotifier
from home_alarm.adapters.web.alarm_routes import alarm_router
from home_alarm.config import AppConfig, __version__
from home_alarm.domain.debounce import DebounceController
from home_alarm.domain.errors import AuthError
from home_alarm.ports.outbound import NotificationPort, SchedulerPort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _auth_error_handler(request: Request, exc: AuthError):
    _log(f"[Server] unauthorized {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Unauthorized", status_code=401)


async def _access_log(request: Request, call_next):
    # Path only: the query string carries the token.
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    _log(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f} ms")
    return response


def create_app(
    config: Optional[AppConfig] = None,
    notifier: Optional[NotificationPort] = None,
    scheduler: Optional[SchedulerPort] = None,
) -> FastAPI:
    """Build the relay app. Tests pass their own notifier and scheduler."""
    config = config or AppConfig.from_env()
    notifier = notifier or DiscordWebhookNotifier(timeout_seconds=config.notify_timeout_seconds)
    controller = DebounceController(notifier, config.discord_webhook_trigger, scheduler=scheduler)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log(f"[Server] home alarm relay {__version__} starting")
        _log(f"[Server] trigger delay: {config.trigger_delay_ms} ms")
        if not config.token:
            _log("[Server] TOKEN is not set, every request will be rejected")
        if not config.discord_webhook_activated:
            _log("[Server] DISCORD_WEBHOOK_ACTIVATED is not set")
        if not config.discord_webhook_trigger:
            _log("[Server] DISCORD_WEBHOOK_TRIGGER is not set")
        yield
        await controller.aclose()
        _log("[Server] stopped")

    # No unauthenticated schema or docs pages.
    app = FastAPI(
        title="Home Alarm Relay",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.notifier = notifier
    app.state.controller = controller

    app.add_exception_handler(AuthError, _auth_error_handler)
    app.middleware("http")(_access_log)
    app.include_router(alarm_router)
    return app
