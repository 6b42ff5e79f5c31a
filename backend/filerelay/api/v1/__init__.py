"""
API v1 - File Relay HTTP API

Public retrieval endpoints with OpenAPI/Swagger documentation.
"""

from flask import Blueprint
from flask_restx import Api

from .namespaces import file_ns


def create_api_blueprint() -> Blueprint:
    """
    Build the v1 blueprint with its own Api instance.

    A fresh blueprint per application keeps the factory usable for
    several apps in one process (tests, the Celery worker).
    """
    # Retrieval links are handed out as <base>/file/<unique_id>, so no url prefix
    blueprint = Blueprint("api_v1", __name__)

    api = Api(
        blueprint,
        version="1.0",
        title="File Relay API",
        description="Streams files registered through the chat intake back over HTTP",
        doc="/docs",
        # No authentication required: holding the identifier grants access
    )
    api.add_namespace(file_ns, path="/file")

    return blueprint
