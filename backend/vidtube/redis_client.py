"""Redis client for caching derived counts."""

import redis
from redis.exceptions import RedisError
from vidtube.config import settings
from vidtube.logger import redis_logger


class RedisClient:
    """
    Thin Redis wrapper.

    Keys are namespaced with ``settings.cache_key_prefix``. Any Redis failure
    is logged and reported as a miss, so callers fall back on the database.
    """

    def __init__(self, url: str | None = None, prefix: str | None = None):
        self._client = None
        self._url = settings.redis_url if url is None else url
        self._prefix = settings.cache_key_prefix if prefix is None else prefix
        self._connect()

    def _connect(self):
        if not self._url:
            redis_logger.info("Redis URL not configured, caching disabled")
            return

        try:
            self._client = redis.from_url(
                self._url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
            )
            self._client.ping()
            redis_logger.info(f"Redis connected ({settings.environment})")
        except RedisError as e:
            redis_logger.error(f"Redis connection failed: {e}")
            redis_logger.warning("Continuing without channel count caching")
            self._client = None

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}" if self._prefix else key

    @property
    def client(self):
        """Underlying redis.Redis, or None when caching is disabled."""
        return self._client

    def get(self, key: str) -> str | None:
        if not self._client:
            return None

        try:
            return self._client.get(self._key(key))
        except RedisError as e:
            redis_logger.debug(f"Redis GET {key} failed: {e}")
            return None

    def set(self, key: str, value: str, expire: int | None = None) -> bool:
        """
        Store a value.

        Args:
            key: Cache key, without the namespace prefix
            value: Serialized value
            expire: TTL in seconds (optional)

        Returns:
            True if Redis accepted the write
        """
        if not self._client:
            return False

        try:
            return bool(self._client.set(self._key(key), value, ex=expire))
        except RedisError as e:
            redis_logger.debug(f"Redis SET {key} failed: {e}")
            return False

    def delete(self, *keys: str) -> bool:
        """Delete keys. Stale entries left by a failure expire with their TTL."""
        if not self._client or not keys:
            return False

        try:
            return self._client.delete(*(self._key(k) for k in keys)) > 0
        except RedisError as e:
            redis_logger.warning(f"Redis DELETE {keys} failed: {e}")
            return False

    def close(self):
        if self._client:
            self._client.close()


redis_client = RedisClient()


def get_redis() -> RedisClient:
    return redis_client
