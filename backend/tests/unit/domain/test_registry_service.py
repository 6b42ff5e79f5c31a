"""
Unit tests for the FileRegistry domain service.
"""

import pytest

from filerelay.domain.errors import (
    MalformedRecordError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from filerelay.domain.file_registry import FileDescriptor


class TestRegister:

    def test_writes_record_under_prefixed_key(self, registry, record_store, report_descriptor):
        registry.register(report_descriptor, "docs/report.pdf")

        assert record_store.keys() == ["file_u1"]
        assert record_store.read_field("file_u1", "path") == "docs/report.pdf"

    def test_single_write_per_registration(self, registry, record_store, report_descriptor):
        registry.register(report_descriptor, "docs/report.pdf")

        writes = [c for c in record_store.get_call_history() if c["method"] == "write_all"]
        assert len(writes) == 1

    def test_reregistration_replaces_record(self, registry, record_store, report_descriptor):
        registry.register(report_descriptor, "docs/report.pdf")
        second = FileDescriptor(file_id="abc", unique_id="u1", size=5, token="tok2")

        registry.register(second, "docs/other.bin")

        assert record_store.read_all("file_u1") == {
            "path": "docs/other.bin",
            "mime": "application/octet-stream",
            "name": "unnamed",
            "token": "tok2",
            "size": "5",
        }

    def test_logs_tagged_registration_line(self, registry, report_descriptor, caplog):
        with caplog.at_level("INFO", logger="filerelay.domain.file_registry.services"):
            registry.register(report_descriptor, "docs/report.pdf")

        assert (
            "[REGISTRY] unique id: u1, path: docs/report.pdf, mime: application/pdf"
            in caplog.messages
        )

    def test_store_unavailable_propagates(self, registry, record_store, report_descriptor):
        record_store.available = False

        with pytest.raises(StoreUnavailableError):
            registry.register(report_descriptor, "docs/report.pdf")


class TestLookup:

    def test_returns_registered_record(self, registry, report_descriptor):
        registry.register(report_descriptor, "docs/report.pdf")

        record = registry.lookup("u1")

        assert record.name == "report.pdf"
        assert record.path == "docs/report.pdf"

    def test_unknown_id_on_empty_store(self, registry):
        with pytest.raises(RecordNotFoundError):
            registry.lookup("never-registered")

    def test_incomplete_record_is_malformed(self, registry, record_store):
        record_store.put_raw("file_u1", {"path": "p", "name": "n", "mime": "m"})

        with pytest.raises(MalformedRecordError):
            registry.lookup("u1")

    def test_store_unavailable_propagates(self, registry, record_store):
        record_store.available = False

        with pytest.raises(StoreUnavailableError):
            registry.lookup("u1")
