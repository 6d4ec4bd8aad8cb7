from home_alarm.adapters.web.server import create_app

__all__ = ["create_app"]
