"""
Telegram Bot API Client

Minimal requests-based client for the Bot API calls the intake needs.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from filerelay.domain.errors import IntakeError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.telegram.org"


class TelegramClient:
    """
    Bot API client bound to one bot token.

    Every call either returns the ``result`` member of the Bot API
    envelope or raises IntakeError.
    """

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL,
                 session: Optional[requests.Session] = None, timeout: float = 10.0):
        if not token:
            raise ValueError("Telegram bot token is required")
        self._token = token
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def token(self) -> str:
        """Credential stored with each record to build origin fetch URLs."""
        return self._token

    def _call(self, method: str, payload: Dict[str, Any], timeout: Optional[float] = None) -> Any:
        url = f"{self.api_url}/bot{self._token}/{method}"
        try:
            response = self.session.post(url, json=payload, timeout=timeout or self.timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"[TELEGRAM] {method} failed: {e.__class__.__name__}")
            raise IntakeError(f"{method} request failed", e) from e

        if not data.get("ok"):
            description = data.get("description", "unknown error")
            logger.error(f"[TELEGRAM] {method} rejected: {description}")
            raise IntakeError(f"{method} rejected: {description}")

        return data.get("result")

    def get_updates(self, offset: Optional[int] = None, timeout: int = 30) -> List[Dict[str, Any]]:
        """Long-poll for new updates starting at ``offset``."""
        payload: Dict[str, Any] = {"timeout": timeout, "allowed_updates": ["message"]}
        if offset is not None:
            payload["offset"] = offset
        # the HTTP timeout must outlast the long-poll timeout
        return self._call("getUpdates", payload, timeout=timeout + self.timeout) or []

    def get_file(self, file_id: str) -> str:
        """
        Resolve a file id to its origin-relative download path.

        Raises:
            IntakeError: The call failed or no path was returned
        """
        result = self._call("getFile", {"file_id": file_id}) or {}
        path = result.get("file_path")
        if not path:
            raise IntakeError(f"no file_path returned for {file_id}")
        return path

    def send_message(self, chat_id: int, text: str,
                     reply_to_message_id: Optional[int] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_to_message_id is not None:
            payload["reply_parameters"] = {"message_id": reply_to_message_id}
        return self._call("sendMessage", payload)
