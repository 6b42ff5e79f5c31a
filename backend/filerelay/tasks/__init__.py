"""
Celery Tasks

Registered on the worker through ``celery_app.conf.imports``.
"""
