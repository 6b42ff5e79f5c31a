"""
Redis Configuration

Configures Redis connection settings and provides the process-wide
client handle shared by the HTTP server, the intake poller and tasks.
"""

import os
import threading
from typing import Optional

from filerelay.infrastructure.redis_connection import RedisConnectionManager
from filerelay.infrastructure.redis_record_store import RedisRecordStore


class RedisConfig:
    """Redis configuration settings."""

    def __init__(self):
        # REDIS_ADDRESS is accepted for older deployments
        self.url = os.getenv(
            "REDIS_URL", os.getenv("REDIS_ADDRESS", "redis://127.0.0.1:6379/0")
        )
        self.max_connections = int(os.getenv("REDIS_MAX_CONNECTIONS", 20))
        self.socket_timeout = float(os.getenv("REDIS_SOCKET_TIMEOUT", 5))


# Global Redis connection manager
_redis_manager: Optional[RedisConnectionManager] = None
_init_lock = threading.Lock()


def init_redis(config: Optional[RedisConfig] = None) -> RedisConnectionManager:
    """
    Initialize the Redis connection manager if it does not exist yet.

    No connection is opened until the client is first used.

    Args:
        config: Redis configuration, uses default if None

    Returns:
        RedisConnectionManager instance
    """
    global _redis_manager

    with _init_lock:
        if _redis_manager is None:
            if config is None:
                config = RedisConfig()
            _redis_manager = RedisConnectionManager(
                url=config.url,
                max_connections=config.max_connections,
                socket_timeout=config.socket_timeout,
            )
    return _redis_manager


def get_redis_client():
    """
    Get Redis client instance.

    Raises:
        RuntimeError: If Redis is not initialized
    """
    if _redis_manager is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")

    return _redis_manager.client


def get_record_store() -> RedisRecordStore:
    """Get a record store bound to the shared Redis client."""
    return RedisRecordStore(get_redis_client())


def shutdown_redis() -> None:
    """Close the shared connection pool and forget the manager."""
    global _redis_manager

    with _init_lock:
        if _redis_manager is not None:
            _redis_manager.close()
            _redis_manager = None


def redis_health_check() -> bool:
    """
    Check Redis connection health.

    Returns:
        True if Redis is healthy, False otherwise
    """
    if _redis_manager is None:
        return False

    return _redis_manager.health_check()
