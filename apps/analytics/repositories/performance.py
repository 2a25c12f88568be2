# apps/analytics/repositories/performance.py
from functools import wraps
import time
import logging

from django.conf import settings

logger = logging.getLogger(__name__)


def monitor_query_performance(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time

        threshold = getattr(settings, 'KIRK_SLOW_QUERY_SECONDS', 1.0)
        if execution_time > threshold:
            logger.warning(f"Slow query: {func.__name__} took {execution_time:.2f}s")
        else:
            logger.debug(f"{func.__name__} took {execution_time * 1000:.1f}ms")

        return result
    return wrapper
