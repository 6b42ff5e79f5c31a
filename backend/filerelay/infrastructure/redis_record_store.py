"""
Redis Record Store

Concrete Redis hash implementation of the RecordStore contract.
"""

import logging
from typing import Dict, Mapping, Optional

import redis
from redis.exceptions import RedisError

from filerelay.domain.errors import StoreUnavailableError
from filerelay.domain.file_registry.repositories import RecordStore

logger = logging.getLogger(__name__)


class RedisRecordStore(RecordStore):
    """
    Stores each record as one Redis hash.

    Writes replace the whole hash inside a MULTI/EXEC transaction, so a
    concurrent HGETALL observes either the previous record or the new
    one. Concurrent writers to the same key race; the last EXEC wins.
    """

    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    def write_all(self, key: str, fields: Mapping[str, str]) -> None:
        try:
            with self.redis.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                pipe.hset(key, mapping=dict(fields))
                pipe.execute()
        except RedisError as e:
            logger.error(f"Error writing record {key}: {e}")
            raise StoreUnavailableError(f"could not write record {key}", e) from e

    def read_all(self, key: str) -> Optional[Dict[str, str]]:
        try:
            data = self.redis.hgetall(key)
        except RedisError as e:
            logger.error(f"Error reading record {key}: {e}")
            raise StoreUnavailableError(f"could not read record {key}", e) from e

        if not data:
            return None
        return {_decode(k): _decode(v) for k, v in data.items()}

    def read_field(self, key: str, name: str) -> Optional[str]:
        try:
            value = self.redis.hget(key, name)
        except RedisError as e:
            logger.error(f"Error reading field {name} of record {key}: {e}")
            raise StoreUnavailableError(f"could not read record {key}", e) from e

        return None if value is None else _decode(value)

    def health_check(self) -> bool:
        try:
            return bool(self.redis.ping())
        except RedisError:
            return False


def _decode(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value
