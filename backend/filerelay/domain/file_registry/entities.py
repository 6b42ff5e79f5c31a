"""
File Registry Entities

Domain entity for a registered file record.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

from ..errors import MalformedRecordError
from .value_objects import FileDescriptor, RecordKey

# Fields a record must carry before it can be served
REQUIRED_FIELDS = ("path", "token", "mime", "name")


@dataclass
class FileRecord:
    """
    Entity representing one registered file.

    A record is always written and replaced as a whole; fields are
    never updated individually.
    """

    unique_id: str
    path: str
    mime: str
    name: str
    token: str
    size: int = 0

    @classmethod
    def from_descriptor(cls, descriptor: FileDescriptor, path: str) -> "FileRecord":
        """
        Build a record from an intake descriptor and its resolved origin path.

        Missing mime and name are replaced by their defaults.
        """
        return cls(
            unique_id=descriptor.unique_id,
            path=path,
            mime=descriptor.effective_mime,
            name=descriptor.effective_name,
            token=descriptor.token,
            size=descriptor.size,
        )

    @classmethod
    def from_fields(cls, unique_id: str, fields: Mapping[str, str]) -> "FileRecord":
        """
        Rebuild a record from stored string fields.

        Raises:
            MalformedRecordError: If any field required for retrieval is absent
        """
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise MalformedRecordError(
                f"record {unique_id} is missing fields: {', '.join(missing)}"
            )

        try:
            size = int(fields.get("size") or 0)
        except ValueError:
            # size is advisory only
            size = 0

        return cls(
            unique_id=unique_id,
            path=fields["path"],
            mime=fields["mime"],
            name=fields["name"],
            token=fields["token"],
            size=size,
        )

    @property
    def key(self) -> RecordKey:
        return RecordKey(self.unique_id)

    def to_fields(self) -> Dict[str, str]:
        """Serialize to the string fields stored under the record key."""
        return {
            "path": self.path,
            "mime": self.mime,
            "name": self.name,
            "token": self.token,
            "size": str(self.size),
        }
