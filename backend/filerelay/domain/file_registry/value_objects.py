"""
File Registry Value Objects

Immutable value objects describing an inbound file and its record key.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import ValidationError

# Substituted at registration when the intake channel omits them
DEFAULT_MIME = "application/octet-stream"
DEFAULT_NAME = "unnamed"

RECORD_KEY_PREFIX = "file_"


@dataclass(frozen=True)
class RecordKey:
    """
    Value object for the record store key of a registered file.

    The key is always ``"file_" + unique_id``.
    """

    unique_id: str

    def __post_init__(self):
        if not isinstance(self.unique_id, str) or not self.unique_id:
            raise ValidationError("unique_id must be a non-empty string")

    @property
    def value(self) -> str:
        return RECORD_KEY_PREFIX + self.unique_id

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileDescriptor:
    """
    A classified file as reported by the intake channel.

    Attributes:
        file_id: Platform file id, used to resolve the origin path
        unique_id: Content-derived id, stable across re-uploads
        size: Declared byte size (advisory)
        token: Credential needed to build an origin fetch URL
        name: Display filename, if the platform supplied one
        mime: Declared content type, if the platform supplied one
    """

    file_id: str
    unique_id: str
    size: int
    token: str
    name: Optional[str] = None
    mime: Optional[str] = None

    def __post_init__(self):
        if not self.file_id:
            raise ValidationError("file descriptor is missing file_id")
        if not self.unique_id:
            raise ValidationError("file descriptor is missing unique_id")
        if self.size is None or self.size < 0:
            raise ValidationError("file size must be a non-negative integer")

    @property
    def key(self) -> RecordKey:
        return RecordKey(self.unique_id)

    @property
    def effective_mime(self) -> str:
        return self.mime or DEFAULT_MIME

    @property
    def effective_name(self) -> str:
        return self.name or DEFAULT_NAME
