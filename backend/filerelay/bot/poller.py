"""
Bot Poller

Long-polls the Bot API for updates and hands each message to a dispatcher.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from filerelay.application.intake_service import IntakeService
from filerelay.config.telegram_config import DISPATCH_CELERY
from filerelay.domain.errors import IntakeError
from filerelay.infrastructure.telegram_client import TelegramClient

logger = logging.getLogger(__name__)

Dispatch = Callable[[Dict[str, Any]], Any]

# Seconds to wait after a failed getUpdates before polling again
ERROR_BACKOFF = 1.0


class BotPoller:
    """
    getUpdates loop with an advancing offset.

    Each message is an independent unit of work: a failing message is
    logged and skipped, it never stops the loop.
    """

    def __init__(self, telegram_client: TelegramClient, dispatch: Dispatch,
                 poll_timeout: int = 30):
        self.telegram = telegram_client
        self.dispatch = dispatch
        self.poll_timeout = poll_timeout
        self.offset: Optional[int] = None
        self._stop_event = threading.Event()

    def poll_once(self) -> int:
        """
        Fetch one batch of updates and dispatch their messages.

        Returns:
            Number of updates consumed
        """
        updates = self.telegram.get_updates(offset=self.offset, timeout=self.poll_timeout)

        for update in updates:
            self.offset = update["update_id"] + 1
            message = update.get("message")
            if not message:
                continue
            try:
                self.dispatch(message)
            except Exception:
                logger.exception(
                    f"[INTAKE] Dispatch failed for update {update['update_id']}"
                )

        return len(updates)

    def run_forever(self) -> None:
        logger.info("Starting...")
        while not self._stop_event.is_set():
            try:
                self.poll_once()
            except IntakeError as e:
                logger.warning(f"[INTAKE] getUpdates failed: {e}")
                self._stop_event.wait(ERROR_BACKOFF)
        logger.info("Poller stopped")

    def stop(self) -> None:
        """Ask the loop to exit after the current poll."""
        self._stop_event.set()


def build_dispatch(app, mode: str) -> Dispatch:
    """
    Choose how messages are processed.

    ``inline`` handles each message in the poller process; ``celery``
    enqueues ``tasks.process_message`` for a worker.
    """
    if mode == DISPATCH_CELERY:
        celery = getattr(app, "celery", None)
        if celery is None:
            raise RuntimeError("INTAKE_DISPATCH=celery but Celery is not available")

        def enqueue(message: Dict[str, Any]) -> None:
            celery.send_task("tasks.process_message", args=(message,))
            logger.info(f"[INTAKE] Enqueued message {message.get('message_id')}")

        return enqueue

    return app.container.resolve(IntakeService).handle_message
