"""
Record Store Contract Tests

Every RecordStore implementation must satisfy the same behavior: whole
record replacement, None for absent keys and fields, and no cross-key
effects.
"""

import pytest

from filerelay.domain.file_registry.repositories import RecordStore
from filerelay.infrastructure.redis_record_store import RedisRecordStore
from tests.fixtures.mock_repositories import FakeRedis, InMemoryRecordStore

FIRST = {"path": "a/1", "mime": "application/pdf", "name": "one.pdf", "token": "t1", "size": "10"}
SECOND = {"path": "b/2", "mime": "image/gif", "name": "two.gif", "token": "t2", "size": "20"}


@pytest.fixture(params=["in_memory", "redis"])
def store(request) -> RecordStore:
    if request.param == "in_memory":
        return InMemoryRecordStore()
    return RedisRecordStore(FakeRedis())


def test_is_record_store(store):
    assert isinstance(store, RecordStore)


def test_write_then_read_all(store):
    store.write_all("file_a", FIRST)

    assert store.read_all("file_a") == FIRST


def test_read_field(store):
    store.write_all("file_a", FIRST)

    assert store.read_field("file_a", "name") == "one.pdf"


def test_absent_key(store):
    assert store.read_all("file_missing") is None
    assert store.read_field("file_missing", "path") is None


def test_absent_field(store):
    store.write_all("file_a", FIRST)

    assert store.read_field("file_a", "nope") is None


def test_write_replaces_every_field(store):
    store.write_all("file_a", FIRST)
    store.write_all("file_a", SECOND)

    assert store.read_all("file_a") == SECOND


def test_write_drops_fields_absent_from_new_record(store):
    store.write_all("file_a", {**FIRST, "extra": "x"})
    store.write_all("file_a", SECOND)

    assert store.read_field("file_a", "extra") is None


def test_keys_are_independent(store):
    store.write_all("file_a", FIRST)
    store.write_all("file_b", SECOND)

    assert store.read_all("file_a") == FIRST
    assert store.read_all("file_b") == SECOND


def test_health_check(store):
    assert store.health_check() is True
