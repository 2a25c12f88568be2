from .dev import *  # noqa
from decouple import config, Csv

ALLOWED_HOSTS = config("DJANGO_ALLOWED_HOSTS", cast=Csv(), default="staging.kirk-analytics.com,*.run.app")

CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS",
    cast=Csv(),
    default="https://staging-dashboard.kirk-analytics.com"
)

CACHES["default"]["TIMEOUT"] = config("DJANGO_CACHE_TIMEOUT", cast=int, default=600)  # noqa: F405

# Security
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

LOGGING["loggers"]["django"]["level"] = "WARNING"  # noqa: F405

CELERY_TASK_TIME_LIMIT = config("CELERY_TASK_TIME_LIMIT", cast=int, default=1800)
CELERY_TASK_SOFT_TIME_LIMIT = config("CELERY_TASK_SOFT_TIME_LIMIT", cast=int, default=1500)
