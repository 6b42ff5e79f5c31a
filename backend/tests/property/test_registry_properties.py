"""
Property-based tests for the file registry.
"""

import string

from hypothesis import given
from hypothesis import strategies as st

from filerelay.domain.file_registry import FileDescriptor, FileRegistry
from tests.fixtures.mock_repositories import InMemoryRecordStore

unique_ids = st.text(alphabet=string.ascii_letters + string.digits + "-_", min_size=1, max_size=32)
optional_text = st.one_of(st.none(), st.text(min_size=1, max_size=40))


@st.composite
def descriptors(draw, unique_id=None):
    return FileDescriptor(
        file_id=draw(st.text(alphabet=string.ascii_letters, min_size=1, max_size=20)),
        unique_id=unique_id or draw(unique_ids),
        size=draw(st.integers(min_value=0, max_value=2**31)),
        token=draw(st.text(alphabet=string.ascii_letters + string.digits + ":", min_size=1)),
        name=draw(optional_text),
        mime=draw(optional_text),
    )


@given(descriptor=descriptors())
def test_key_is_prefix_plus_unique_id(descriptor):
    store = InMemoryRecordStore()

    FileRegistry(store).register(descriptor, "docs/x")

    assert store.keys() == ["file_" + descriptor.unique_id]


@given(unique_id=unique_ids, data=st.data())
def test_last_registration_fully_wins(unique_id, data):
    store = InMemoryRecordStore()
    registry = FileRegistry(store)
    first = data.draw(descriptors(unique_id=unique_id))
    second = data.draw(descriptors(unique_id=unique_id))

    registry.register(first, "first/path")
    registry.register(second, "second/path")

    record = registry.lookup(unique_id)
    assert record.path == "second/path"
    assert record.token == second.token
    assert record.size == second.size
    assert record.mime == (second.mime or "application/octet-stream")
    assert record.name == (second.name or "unnamed")


@given(descriptor=descriptors())
def test_registered_record_is_always_servable(descriptor):
    registry = FileRegistry(InMemoryRecordStore())

    registry.register(descriptor, "docs/x")

    record = registry.lookup(descriptor.unique_id)
    assert record.mime and record.name and record.token and record.path
