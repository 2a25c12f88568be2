from .facts import CHANNEL_FETCHERS, FactRowRepository
from .performance import monitor_query_performance

__all__ = ['CHANNEL_FETCHERS', 'FactRowRepository', 'monitor_query_performance']
