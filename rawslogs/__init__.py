from .errors import DataIntegrityError, LogsApiError, LogsError, RateLimited
from .logs_api import LogsApi
from .retrieval import EventQuery, LogRetriever

__all__ = [
    "DataIntegrityError",
    "EventQuery",
    "LogRetriever",
    "LogsApi",
    "LogsApiError",
    "LogsError",
    "RateLimited",
]
