"""
Intake Service

Handles one inbound chat message: classify, register, reply.
"""

import logging
from typing import Any, Dict, Optional

from filerelay.application.message_classifier import classify_message, is_service_message
from filerelay.application.registration_service import RegistrationService
from filerelay.domain.errors import (
    ERROR_MESSAGES,
    ErrorCategory,
    IntakeError,
    StoreUnavailableError,
    ValidationError,
)
from filerelay.infrastructure.telegram_client import TelegramClient

logger = logging.getLogger(__name__)


class IntakeService:
    """
    Application service driving the chat side of registration.

    Every outcome is reported back to the chat; errors never propagate
    past a single message.
    """

    def __init__(self, telegram_client: TelegramClient,
                 registration_service: RegistrationService):
        self.telegram = telegram_client
        self.registration_service = registration_service

    def handle_message(self, message: Dict[str, Any]) -> Optional[str]:
        """
        Register the file in a message and reply with its public URL.

        Args:
            message: Bot API ``Message`` object

        Returns:
            The public URL, or None when nothing was registered
        """
        if is_service_message(message):
            return None

        chat_id = message["chat"]["id"]
        message_id = message.get("message_id")

        try:
            descriptor = classify_message(message, self.telegram.token)
        except ValidationError as e:
            logger.info(f"[INTAKE] Message {message_id} rejected: {e}")
            self._reply(chat_id, ERROR_MESSAGES[ErrorCategory.NOT_A_FILE], message_id)
            return None

        try:
            url = self.registration_service.register(descriptor)
        except (StoreUnavailableError, IntakeError) as e:
            logger.error(f"[INTAKE] Registration failed for {descriptor.unique_id}: {e}")
            self._reply(chat_id, ERROR_MESSAGES[ErrorCategory.INTAKE_FAILED])
            return None

        self._reply(chat_id, url, message_id)
        return url

    def _reply(self, chat_id: int, text: str, reply_to: Optional[int] = None) -> None:
        try:
            self.telegram.send_message(chat_id, text, reply_to_message_id=reply_to)
        except IntakeError as e:
            logger.error(f"[INTAKE] Could not reply in chat {chat_id}: {e}")
