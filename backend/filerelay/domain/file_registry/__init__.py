"""
File Registry Domain

Record-keyed registry of files received through the intake channel.
"""

from .entities import REQUIRED_FIELDS, FileRecord
from .repositories import RecordStore
from .services import FileRegistry
from .value_objects import (
    DEFAULT_MIME,
    DEFAULT_NAME,
    RECORD_KEY_PREFIX,
    FileDescriptor,
    RecordKey,
)

__all__ = [
    "DEFAULT_MIME",
    "DEFAULT_NAME",
    "RECORD_KEY_PREFIX",
    "REQUIRED_FIELDS",
    "FileDescriptor",
    "FileRecord",
    "FileRegistry",
    "RecordKey",
    "RecordStore",
]
