"""
Celery Configuration

Optional worker pool for intake messages. The bot enqueues one
``tasks.process_message`` per update; nobody waits on the result.
"""

import os

from celery import Celery
from kombu import Queue

from filerelay.config.redis_config import RedisConfig

_redis_url = RedisConfig().url


class CeleryConfig:
    """Celery settings for the intake queue."""

    broker_url = os.getenv("CELERY_BROKER_URL", _redis_url)
    result_backend = os.getenv("CELERY_RESULT_BACKEND", _redis_url)

    # Telegram update payloads are plain JSON
    task_serializer = "json"
    accept_content = ["json"]
    task_ignore_result = True

    # A redelivered message at worst re-registers the same record
    worker_prefetch_multiplier = 1
    task_acks_late = True

    task_routes = {
        "tasks.process_message": {"queue": "intake_queue"},
    }
    task_default_queue = "intake_queue"
    task_queues = (Queue("intake_queue", routing_key="intake"),)

    # One getFile call and one Redis write
    task_soft_time_limit = int(os.getenv("CELERY_TASK_SOFT_TIME_LIMIT", 60))
    task_time_limit = int(os.getenv("CELERY_TASK_TIME_LIMIT", 90))

    worker_concurrency = int(os.getenv("CELERY_WORKER_CONCURRENCY", 4))


def make_celery(app):
    """
    Build the Celery app bound to a Flask app.

    Tasks run inside ``app.app_context()`` so they can resolve services
    from ``app.container``.
    """
    celery = Celery(
        app.import_name,
        backend=CeleryConfig.result_backend,
        broker=CeleryConfig.broker_url,
    )
    celery.config_from_object(CeleryConfig)

    class IntakeContextTask(celery.Task):
        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery.Task = IntakeContextTask
    return celery
