"""Kirk project package.

Loading the Celery app here binds @shared_task report jobs to the app
configured from Django settings.
"""

from .celery import app as celery_app  # noqa: F401

__all__ = ("celery_app",)
