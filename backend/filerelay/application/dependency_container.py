"""
Dependency Injection Container

Manages service lifecycles and dependency resolution.
"""

import logging
import threading
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DependencyNotFoundError(Exception):
    """Raised when attempting to resolve an unregistered dependency."""
    pass


class DependencyContainer:
    """
    Registry of process-wide service singletons.

    Thread-safe for concurrent resolution from request handlers and
    Celery workers. Overrides take precedence and exist for tests.
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._overrides: Dict[Type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """
        Register a singleton service (single instance shared across all resolutions).

        Example:
            container.register_singleton(RetrievalService, retrieval_service)
        """
        with self._lock:
            self._singletons[interface] = implementation
            logger.debug(f"Registered singleton: {interface.__name__}")

    def resolve(self, interface: Type[T]) -> T:
        """
        Resolve a registered service.

        Raises:
            DependencyNotFoundError: If the interface is not registered
        """
        with self._lock:
            if interface in self._overrides:
                return self._overrides[interface]
            if interface in self._singletons:
                return self._singletons[interface]

        raise DependencyNotFoundError(
            f"No registration found for type: {interface.__name__}"
        )

    def override(self, interface: Type[T], implementation: T) -> None:
        """Override a registered service (primarily for testing)."""
        with self._lock:
            self._overrides[interface] = implementation
            logger.debug(f"Overridden: {interface.__name__}")

    def clear_overrides(self) -> None:
        with self._lock:
            self._overrides.clear()

    def is_registered(self, interface: Type) -> bool:
        with self._lock:
            return interface in self._singletons or interface in self._overrides
