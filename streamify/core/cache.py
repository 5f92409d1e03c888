# ============================================================================
# FILE: streamify/core/cache.py
# ============================================================================
import redis
import json
from typing import Optional, Any
from streamify.config import settings
import logging

logger = logging.getLogger(__name__)

class RedisCache:
    """Redis cache helper class"""

    def __init__(self, url: Optional[str] = None, enabled: Optional[bool] = None):
        self.redis_client = None
        if enabled is None:
            enabled = settings.CACHE_ENABLED
        if not enabled:
            logger.info("Caching disabled by configuration")
            return
        try:
            self.redis_client = redis.from_url(
                url or settings.REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=2,
            )
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self.redis_client = None

    @property
    def enabled(self) -> bool:
        return self.redis_client is not None

    def set_cache(self, key: str, value: Any, expire: int = None) -> bool:
        """Set a cache value with optional expiration"""
        if not self.redis_client:
            return False

        try:
            serialized = json.dumps(value, default=str)
            if expire:
                self.redis_client.setex(key, expire, serialized)
            else:
                self.redis_client.set(key, serialized)
            return True
        except Exception as e:
            logger.error(f"Cache set error: {e}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        """Get a cache value"""
        if not self.redis_client:
            return None

        try:
            value = self.redis_client.get(key)
            if value:
                return json.loads(value)
            return None
        except Exception as e:
            logger.error(f"Cache get error: {e}")
            return None

    def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with prefix, returns the number removed"""
        if not self.redis_client:
            return 0

        try:
            keys = list(self.redis_client.scan_iter(match=f"{prefix}*"))
            if keys:
                self.redis_client.delete(*keys)
            return len(keys)
        except Exception as e:
            logger.error(f"Cache invalidate error: {e}")
            return 0

# Singleton instance
cache = RedisCache()
