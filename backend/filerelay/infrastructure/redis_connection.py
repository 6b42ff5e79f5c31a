"""
Redis Connection Manager

Process-wide Redis client handle with connection pooling.
"""

import logging
import threading
from typing import Optional

import redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisConnectionManager:
    """
    Manages one pooled Redis client shared by every request and task.

    The client is created lazily on first use. redis-py clients are safe
    to share between threads; each command checks a connection out of
    the pool.
    """

    def __init__(self, url: str = "redis://127.0.0.1:6379/0", max_connections: int = 20,
                 socket_timeout: Optional[float] = 5.0):
        self.url = url
        self.max_connections = max_connections
        self.socket_timeout = socket_timeout
        self._pool: Optional[redis.ConnectionPool] = None
        self._client: Optional[redis.Redis] = None
        self._lock = threading.Lock()

    @property
    def client(self) -> redis.Redis:
        """Get the shared Redis client, creating the pool on first access."""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._pool = redis.ConnectionPool.from_url(
                        self.url,
                        max_connections=self.max_connections,
                        socket_timeout=self.socket_timeout,
                        socket_connect_timeout=self.socket_timeout,
                        retry_on_timeout=False,
                        socket_keepalive=True,
                        decode_responses=True,
                    )
                    self._client = redis.Redis(connection_pool=self._pool)
                    logger.debug("Created Redis connection pool")
        return self._client

    def health_check(self) -> bool:
        """Check if Redis connection is healthy."""
        try:
            return bool(self.client.ping())
        except RedisError:
            return False

    def close(self) -> None:
        """Disconnect the pool. A later ``client`` access builds a new one."""
        with self._lock:
            if self._pool is not None:
                self._pool.disconnect()
                logger.debug("Closed Redis connection pool")
            self._pool = None
            self._client = None
