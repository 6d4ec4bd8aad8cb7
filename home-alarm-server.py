#!/usr/bin/env python3
"""
Home Alarm Relay server

Receives alarm events from the keypad/PIR unit and relays them to Discord:
- /alarm/activate  alarm armed, notify right away
- /alarm/trigger   motion detected, notify after TRIGGER_DELAY unless stopped
- /alarm/stop      PIN entered, cancel the pending notification

Settings come from the environment or a .env file (see home_alarm/config.py).
"""

import uvicorn

from home_alarm.adapters.web.server import create_app
from home_alarm.config import AppConfig

if __name__ == "__main__":
    config = AppConfig.from_env()
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")
