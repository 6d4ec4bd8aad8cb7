from home_alarm.adapters.discord.webhook import DiscordWebhookNotifier

__all__ = ["DiscordWebhookNotifier"]
