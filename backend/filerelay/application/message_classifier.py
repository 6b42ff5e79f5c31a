"""
Message Classifier

Extracts a FileDescriptor from a Telegram Bot API message object.
"""

from typing import Any, Dict

from filerelay.domain.errors import ValidationError
from filerelay.domain.file_registry import FileDescriptor

# Attachment kinds served as files, checked in this order.
# Telegram sets "document" alongside "animation", so animation goes first.
FILE_MEDIA_KINDS = ("animation", "video", "document")

# Messages carrying one of these are chat events, not user content
SERVICE_MESSAGE_FIELDS = (
    "new_chat_members",
    "left_chat_member",
    "new_chat_title",
    "new_chat_photo",
    "delete_chat_photo",
    "group_chat_created",
    "supergroup_chat_created",
    "channel_chat_created",
    "migrate_to_chat_id",
    "migrate_from_chat_id",
    "pinned_message",
    "message_auto_delete_timer_changed",
)


def is_service_message(message: Dict[str, Any]) -> bool:
    return any(field in message for field in SERVICE_MESSAGE_FIELDS)


def classify_message(message: Dict[str, Any], token: str) -> FileDescriptor:
    """
    Build a descriptor for the file attached to a message.

    Args:
        message: Bot API ``Message`` object
        token: Bot credential to store with the record

    Raises:
        ValidationError: The message has no animation, video or document
    """
    for kind in FILE_MEDIA_KINDS:
        media = message.get(kind)
        if not media:
            continue
        try:
            return FileDescriptor(
                file_id=media["file_id"],
                unique_id=media["file_unique_id"],
                size=int(media.get("file_size") or 0),
                token=token,
                name=media.get("file_name"),
                mime=media.get("mime_type"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"malformed {kind} attachment", e) from e

    raise ValidationError("message does not contain a file")
