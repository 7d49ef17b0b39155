"""
Key/value cache backed by Redis.

Used for the JWT blacklist: one key per revoked token, expiring together
with the token itself.
"""

import datetime
import logging
from functools import lru_cache
from typing import Optional, Union

import redis

logger = logging.getLogger(__name__)

DEFAULT_TTL = datetime.timedelta(hours=24)


class RedisCache:
    """Thin wrapper over a redis-py client with string values."""

    def __init__(self, client: redis.Redis):
        self.client = client

    def save(self, key: str, value: str, ttl: Optional[Union[datetime.timedelta, int]] = None) -> None:
        """Store *value* under *key*, expiring after *ttl* (24h when omitted)."""
        self.client.set(key, value, ex=ttl if ttl is not None else DEFAULT_TTL)

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` for a missing key."""
        value = self.client.get(key)
        if value is None:
            return None
        return value.decode() if isinstance(value, bytes) else value

    def exists(self, key: str) -> bool:
        return self.client.exists(key) > 0

    def delete(self, key: str) -> None:
        self.client.delete(key)


@lru_cache
def get_redis_client(url: str) -> redis.Redis:
    """Shared client for *url*; redis-py clients pool their own connections."""
    logger.info("Creating Redis client for %s", url)
    return redis.Redis.from_url(url, decode_responses=True)
