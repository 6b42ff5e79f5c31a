"""
main.py

HTTP server for relaying registered files.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, redis, requests
  - Infrastructure: Redis server holding the file records

Notes:
  - GET /file/<unique_id> streams the file from the origin provider
  - Swagger docs at /docs, health check at /health
  - Uses application factory pattern for better testability
"""

import logging
import os

from app_factory import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "127.0.0.1")
    port = int(os.getenv("FLASK_PORT", 3030))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    # threaded so one slow download does not hold up other requests
    app.run(host=host, port=port, debug=debug, threaded=True)
