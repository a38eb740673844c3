import json

from vidtube.config import settings
from vidtube.redis_client import RedisClient, get_redis


class CacheService:
    """Caches channel subscription counts. Viewer-specific flags are never cached."""

    def __init__(self, redis_client: RedisClient | None = None):
        self.redis = redis_client or get_redis()

    @staticmethod
    def _channel_counts_key(user_id: int) -> str:
        return f"channel_counts:{user_id}"

    def get_channel_counts(self, user_id: int) -> dict | None:
        """Get cached {subscribers_count, subscriptions_count} for a channel."""
        data = self.redis.get(self._channel_counts_key(user_id))
        return json.loads(data) if data else None

    def set_channel_counts(self, user_id: int, counts: dict) -> None:
        """Cache channel counts for the configured TTL."""
        self.redis.set(
            self._channel_counts_key(user_id),
            json.dumps(counts),
            expire=settings.channel_counts_cache_ttl,
        )

    def invalidate_channel_counts(self, *user_ids: int) -> None:
        """Drop cached counts for both ends of a subscription change."""
        self.redis.delete(*(self._channel_counts_key(uid) for uid in user_ids))
