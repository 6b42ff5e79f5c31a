"""
bot.py

Telegram intake poller. Every file sent to the bot is registered and
answered with its public retrieval URL.

Environment:
  - TELEGRAM_BOT_TOKEN (required)
  - INTAKE_DISPATCH=inline|celery (default inline)
"""

import logging
import os
import signal
import sys

from app_factory import create_app
from filerelay.bot import BotPoller, build_dispatch
from filerelay.config.redis_config import shutdown_redis
from filerelay.config.telegram_config import TelegramConfig
from filerelay.infrastructure.telegram_client import TelegramClient

logger = logging.getLogger("bot")


def main() -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = TelegramConfig()
    if not config.bot_token:
        logger.error("TELEGRAM_BOT_TOKEN is not set")
        return 1

    app = create_app()
    poller = BotPoller(
        app.container.resolve(TelegramClient),
        build_dispatch(app, config.dispatch),
        poll_timeout=config.poll_timeout,
    )

    def _stop(signum, frame):
        logger.info(f"Received signal {signum}, stopping")
        poller.stop()

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)

    try:
        poller.run_forever()
    finally:
        shutdown_redis()
    return 0


if __name__ == "__main__":
    sys.exit(main())
