"""
File Registry Domain Service

Writes and looks up file records through a RecordStore.
"""

import logging

from ..errors import RecordNotFoundError
from .entities import FileRecord
from .repositories import RecordStore
from .value_objects import FileDescriptor, RecordKey

logger = logging.getLogger(__name__)


class FileRegistry:
    """
    Domain service owning the record key scheme and record lifecycle.

    Records are created on the first registration of a unique id and
    replaced wholesale by any later one. There is no delete path.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def register(self, descriptor: FileDescriptor, path: str) -> FileRecord:
        """
        Store a full record for a descriptor, replacing any previous one.

        Args:
            descriptor: Classified file from the intake channel
            path: Origin-relative path resolved for the descriptor

        Returns:
            The record that was written

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        record = FileRecord.from_descriptor(descriptor, path)
        self.store.write_all(record.key.value, record.to_fields())
        logger.info(
            f"[REGISTRY] unique id: {record.unique_id}, path: {record.path}, mime: {record.mime}"
        )
        return record

    def lookup(self, unique_id: str) -> FileRecord:
        """
        Load the record for a unique id.

        Raises:
            RecordNotFoundError: No record exists
            MalformedRecordError: The record lacks a field needed to serve it
            StoreUnavailableError: If the store cannot be reached
        """
        key = RecordKey(unique_id)
        fields = self.store.read_all(key.value)
        if not fields:
            raise RecordNotFoundError(f"no record for {unique_id}")
        return FileRecord.from_fields(unique_id, fields)
