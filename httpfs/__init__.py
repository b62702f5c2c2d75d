from .fetchers import FetchError, HttpFetcher
from .lru_cache import LRUCache

__all__ = [
    "FetchError",
    "HttpFetcher",
    "LRUCache",
]
