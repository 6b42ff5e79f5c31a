"""
Intake Task

Celery task handling one inbound chat message.
Thin wrapper that delegates to IntakeService.
"""

import logging
from typing import Any, Dict, Optional

from celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="tasks.process_message")
def process_message(self, message: Dict[str, Any]) -> Optional[str]:
    """
    Register the file carried by a message and reply to the chat.

    Args:
        message: Bot API ``Message`` object as received by the poller

    Returns:
        The public URL, or None when nothing was registered
    """
    from celery_app import flask_app
    from filerelay.application.intake_service import IntakeService

    intake_service = flask_app.container.resolve(IntakeService)
    message_id = message.get("message_id")
    logger.info(f"Task started for message {message_id}")

    try:
        return intake_service.handle_message(message)
    except Exception as e:
        logger.error(f"Task failed for message {message_id}: {e}")
        raise
