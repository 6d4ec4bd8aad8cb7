"""Adapters: Discord webhook notifier and FastAPI web surface."""
