"""
Statistics Result Cache

Derived statistics are recomputed on read; results are memoized per
(operation, league, filters) for a short TTL.
"""

import threading

from cachetools import TTLCache

from core.settings import settings

cache = TTLCache(maxsize=settings.cache_max_size, ttl=settings.cache_ttl_seconds)
_lock = threading.Lock()


def get_cache_key(func_name: str, *args, **kwargs) -> str:
    key_parts = [func_name]
    for arg in args:
        key_parts.append(str(arg))
    for k, v in sorted(kwargs.items()):
        key_parts.append(f"{k}={v}")
    return ":".join(key_parts)


def get_cached(key: str):
    with _lock:
        return cache.get(key)


def set_cached(key: str, value):
    with _lock:
        cache[key] = value


def clear_cache():
    with _lock:
        cache.clear()
