"""
Clients API externes.

- TMDBClient: Recherche de films et series sur TMDB
- APICache: Cache disque des recherches
- request_with_retry: Retry avec backoff sur 429
"""

from reelscan.adapters.api.cache import APICache
from reelscan.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from reelscan.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
    "TMDBClient",
]
