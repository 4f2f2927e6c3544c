"""
Redis client for chat sessions and screening locks
"""
import json
from typing import Any, Optional

import redis
from redis.exceptions import RedisError
import structlog

from jia.core.config import settings
from jia.core.exceptions import JiaException

logger = structlog.get_logger()

redis_client = redis.from_url(
    settings.REDIS_URL,
    encoding="utf-8",
    decode_responses=True,
    socket_connect_timeout=5,
    socket_timeout=5,
    retry_on_timeout=True,
    health_check_interval=30,
)


def get_cache_key(prefix: str, *args) -> str:
    """Namespaced key, e.g. chat_session:<id>"""
    return ":".join([prefix, *(str(arg) for arg in args)])


def get_cache(key: str) -> Optional[Any]:
    """JSON value stored under key; None when missing or Redis is down"""
    try:
        value = redis_client.get(key)
    except RedisError as e:
        logger.error("cache_get_error", key=key, error=str(e))
        return None
    return json.loads(value) if value else None


def set_cache(key: str, value: Any, ttl: Optional[int] = None) -> bool:
    """Store value as JSON with an expiry"""
    try:
        return bool(redis_client.setex(key, ttl or settings.REDIS_CACHE_TTL, json.dumps(value, default=str)))
    except RedisError as e:
        logger.error("cache_set_error", key=key, error=str(e))
        return False


def acquire_lock(key: str, timeout: int):
    """
    Try to take a named lock without blocking.
    Returns the lock to release, or None when someone else holds it.
    """
    lock = redis_client.lock(key, timeout=timeout, blocking=False)
    try:
        acquired = lock.acquire()
    except RedisError as e:
        logger.error("lock_acquire_error", key=key, error=str(e))
        raise JiaException("Lock service unavailable", status_code=503, details={"key": key})
    return lock if acquired else None


def release_lock(lock) -> None:
    """Release a lock taken with acquire_lock"""
    try:
        lock.release()
    except RedisError as e:
        # Expired before the holder finished, or Redis went away
        logger.warning("lock_release_failed", key=lock.name, error=str(e))
