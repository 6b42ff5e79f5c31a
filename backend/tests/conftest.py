"""
Shared pytest fixtures and configuration for the File Relay test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Shared fixtures for descriptors, stores, fetchers and the Flask app
- Automatic markers based on test location
"""

import pytest
from hypothesis import HealthCheck, settings

from app_factory import AppConfig, create_app
from filerelay.domain.file_registry import FileDescriptor, FileRegistry
from tests.fixtures.mock_repositories import (
    FakeFetcher,
    FakeTelegramClient,
    InMemoryRecordStore,
)

# Hypothesis configuration
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

PUBLIC_BASE_URL = "http://files.test/file/"


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def report_descriptor() -> FileDescriptor:
    """The report.pdf descriptor used throughout the scenarios."""
    return FileDescriptor(
        file_id="abc",
        unique_id="u1",
        size=1024,
        token="tok",
        name="report.pdf",
        mime="application/pdf",
    )


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def registry(record_store) -> FileRegistry:
    return FileRegistry(record_store)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def telegram_client() -> FakeTelegramClient:
    return FakeTelegramClient(token="tok", paths={"abc": "docs/report.pdf"})


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app_config(monkeypatch) -> AppConfig:
    monkeypatch.setenv("PUBLIC_BASE_URL", PUBLIC_BASE_URL)
    monkeypatch.setenv("CELERY_ENABLED", "false")
    return AppConfig()


@pytest.fixture
def flask_app(app_config, record_store, fetcher, telegram_client):
    """Flask app wired to in-memory collaborators."""
    app = create_app(
        config=app_config,
        record_store=record_store,
        fetcher=fetcher,
        telegram_client=telegram_client,
    )
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests across layers")
    config.addinivalue_line("markers", "contract: Contract tests (verify interface compliance)")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/contracts/" in test_path or "\\contracts\\" in test_path:
            item.add_marker(pytest.mark.contract)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
