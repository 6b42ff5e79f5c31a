"""
Application Factory

Creates and configures the Flask application with all dependencies.
This factory pattern improves testability by allowing dependency injection
and configuration overrides.
"""

import atexit
import logging
import os
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from filerelay.application.dependency_container import DependencyContainer
from filerelay.application.intake_service import IntakeService
from filerelay.application.registration_service import RegistrationService
from filerelay.application.retrieval_service import RetrievalService
from filerelay.config.celery_config import make_celery
from filerelay.config.redis_config import get_record_store, init_redis, shutdown_redis
from filerelay.config.telegram_config import TelegramConfig
from filerelay.domain.file_registry import FileRegistry, RecordStore
from filerelay.infrastructure.telegram_client import TelegramClient
from filerelay.infrastructure.upstream_fetcher import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ORIGIN_FILE_URL,
    UpstreamFetcher,
)

logger = logging.getLogger(__name__)


class AppConfig:
    """Application configuration."""

    def __init__(self):
        # WEBSERVER_ADDRESS is accepted for older deployments
        self.public_base_url = os.getenv(
            "PUBLIC_BASE_URL",
            os.getenv("WEBSERVER_ADDRESS", "http://127.0.0.1:3030/file/"),
        )
        self.origin_file_url = os.getenv("ORIGIN_FILE_URL", DEFAULT_ORIGIN_FILE_URL)
        self.stream_chunk_size = int(os.getenv("STREAM_CHUNK_SIZE", DEFAULT_CHUNK_SIZE))
        self.upstream_connect_timeout = float(os.getenv("UPSTREAM_CONNECT_TIMEOUT", 10))
        self.upstream_read_timeout = float(os.getenv("UPSTREAM_READ_TIMEOUT", 60))
        self.cors_origins = os.getenv("CORS_ORIGINS", "*")
        self.celery_enabled = os.getenv("CELERY_ENABLED", "true").lower() == "true"


def create_app(
    config: Optional[AppConfig] = None,
    record_store: Optional[RecordStore] = None,
    fetcher: Optional[UpstreamFetcher] = None,
    telegram_client: Optional[TelegramClient] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, uses default if None
        record_store: Record store to use instead of the shared Redis one
        fetcher: Upstream fetcher to use instead of a requests-backed one
        telegram_client: Bot API client; built from TELEGRAM_BOT_TOKEN if None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    app = Flask(__name__)
    app.config["PUBLIC_BASE_URL"] = config.public_base_url

    # Retrieval is a plain GET; browsers may fetch it cross-origin
    CORS(
        app,
        resources={
            r"/file/*": {
                "origins": config.cors_origins,
                "methods": ["GET", "OPTIONS"],
                "expose_headers": ["Content-Type", "Content-Disposition"],
                "max_age": 3600,
            }
        },
    )

    if record_store is None:
        init_redis()
        record_store = get_record_store()
        atexit.register(shutdown_redis)

    _initialize_celery(app, config)
    _initialize_services(app, config, record_store, fetcher, telegram_client)
    _register_blueprints(app)
    _register_health_endpoint(app)

    return app


def _initialize_celery(app: Flask, config: AppConfig) -> None:
    """Attach a Celery instance, or None when disabled or unavailable."""
    app.celery = None
    if not config.celery_enabled:
        logger.info("Celery disabled - intake messages are handled inline only")
        return

    try:
        app.celery = make_celery(app)
        logger.info("Celery initialized successfully")
    except Exception as e:
        logger.warning(f"Could not initialize Celery: {e}")


def _initialize_services(
    app: Flask,
    config: AppConfig,
    record_store: RecordStore,
    fetcher: Optional[UpstreamFetcher],
    telegram_client: Optional[TelegramClient],
) -> None:
    """
    Build application services and register them in a DependencyContainer.

    The container is attached to the app; API resources and Celery
    tasks resolve services from it rather than constructing them.
    """
    container = DependencyContainer()

    registry = FileRegistry(record_store)
    container.register_singleton(RecordStore, record_store)
    container.register_singleton(FileRegistry, registry)

    if fetcher is None:
        fetcher = UpstreamFetcher(
            origin_url=config.origin_file_url,
            timeout=(config.upstream_connect_timeout, config.upstream_read_timeout),
            chunk_size=config.stream_chunk_size,
        )
    container.register_singleton(UpstreamFetcher, fetcher)
    container.register_singleton(RetrievalService, RetrievalService(registry, fetcher))

    if telegram_client is None:
        telegram_config = TelegramConfig()
        if telegram_config.bot_token:
            telegram_client = TelegramClient(
                telegram_config.bot_token, api_url=telegram_config.api_url
            )

    # The HTTP server does not need the intake side, so a missing token is fine
    if telegram_client is not None:
        registration_service = RegistrationService(
            registry, telegram_client, config.public_base_url
        )
        container.register_singleton(TelegramClient, telegram_client)
        container.register_singleton(RegistrationService, registration_service)
        container.register_singleton(
            IntakeService, IntakeService(telegram_client, registration_service)
        )
    else:
        logger.info("TELEGRAM_BOT_TOKEN not set - intake services not registered")

    app.container = container


def _register_blueprints(app: Flask) -> None:
    from filerelay.api.v1 import create_api_blueprint

    app.register_blueprint(create_api_blueprint())


def _register_health_endpoint(app: Flask) -> None:
    """
    Register health check endpoint.

    Args:
        app: Flask application
    """

    @app.route("/health", methods=["GET"])
    def health():
        """Report record store connectivity."""
        store = app.container.resolve(RecordStore)
        connected = store.health_check()
        health_status = {
            "status": "ok" if connected else "degraded",
            "redis": "connected" if connected else "disconnected",
        }
        return jsonify(health_status), 200 if connected else 503
