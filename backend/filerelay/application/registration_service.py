"""
Registration Service

Turns a classified intake descriptor into a stored record and a public URL.
"""

import logging
from typing import Protocol

from filerelay.domain.file_registry import FileDescriptor, FileRegistry

logger = logging.getLogger(__name__)


class FilePathResolver(Protocol):
    """Anything that maps a platform file id to its origin path."""

    def get_file(self, file_id: str) -> str:
        ...


class RegistrationService:
    """
    Application service for the registration path.

    Nothing is retried here. A store failure surfaces as
    StoreUnavailableError and a resolver failure as IntakeError; in
    both cases no record is written.
    """

    def __init__(self, registry: FileRegistry, file_resolver: FilePathResolver,
                 public_base_url: str):
        self.registry = registry
        self.file_resolver = file_resolver
        self.public_base_url = public_base_url

    def register(self, descriptor: FileDescriptor) -> str:
        """
        Register a file and return its public retrieval URL.

        Args:
            descriptor: Classified file from the intake channel

        Returns:
            ``public_base_url + unique_id``
        """
        path = self.file_resolver.get_file(descriptor.file_id)
        record = self.registry.register(descriptor, path)
        return self.public_url(record.unique_id)

    def public_url(self, unique_id: str) -> str:
        return self.public_base_url + unique_id
