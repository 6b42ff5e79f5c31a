"""
File Registry Repositories

Repository interface for the key-value record store.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional


class RecordStore(ABC):
    """
    Abstract key-value contract used by the file registry.

    Only single-key atomicity is required; no operation spans keys.
    Implementations raise StoreUnavailableError when the backend
    cannot be reached.
    """

    @abstractmethod
    def write_all(self, key: str, fields: Mapping[str, str]) -> None:
        """
        Replace every field stored under ``key`` in one atomic operation.

        Fields present before the call and absent from ``fields`` must
        not survive it. A concurrent reader sees either the old record
        or the new one, never a mix.

        Args:
            key: Record key
            fields: Complete set of fields for the record
        """
        pass

    @abstractmethod
    def read_all(self, key: str) -> Optional[Dict[str, str]]:
        """
        Read every field stored under ``key``.

        Args:
            key: Record key

        Returns:
            Field mapping, or None if no record exists
        """
        pass

    @abstractmethod
    def read_field(self, key: str, name: str) -> Optional[str]:
        """
        Read a single field.

        Args:
            key: Record key
            name: Field name

        Returns:
            Field value, or None if the record or field is absent
        """
        pass

    def health_check(self) -> bool:
        """Return True when the backing store answers."""
        return True
