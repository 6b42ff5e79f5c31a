"""
Telegram Configuration

Settings for the intake poller and the Bot API client.
"""

import os

from filerelay.infrastructure.telegram_client import DEFAULT_API_URL

DISPATCH_INLINE = "inline"
DISPATCH_CELERY = "celery"


class TelegramConfig:
    """Telegram intake settings."""

    def __init__(self):
        self.bot_token = os.getenv("TELEGRAM_BOT_TOKEN", "")
        self.api_url = os.getenv("TELEGRAM_API_URL", DEFAULT_API_URL)
        self.poll_timeout = int(os.getenv("TELEGRAM_POLL_TIMEOUT", 30))
        self.dispatch = os.getenv("INTAKE_DISPATCH", DISPATCH_INLINE).lower()
        if self.dispatch not in (DISPATCH_INLINE, DISPATCH_CELERY):
            raise ValueError(
                f"INTAKE_DISPATCH must be '{DISPATCH_INLINE}' or '{DISPATCH_CELERY}'"
            )
