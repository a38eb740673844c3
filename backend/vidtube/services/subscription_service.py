"""Subscribe/unsubscribe toggles and subscriber/subscription lists."""

from sqlalchemy.orm import Session

from vidtube.exceptions import NotFoundError, PolicyViolationError
from vidtube.logger import engagement_logger
from vidtube.models import Subscription, User
from vidtube.schemas.engagement import SubscriptionStatus
from vidtube.schemas.user import OwnerSummary
from vidtube.services.authorization import authorize
from vidtube.services.cache import CacheService
from vidtube.services.store import delete_if_present, insert_if_absent
from vidtube.services.validation import parse_id


class SubscriptionService:
    """Service for the subscriber -> channel graph."""

    def __init__(self, db: Session, cache: CacheService | None = None):
        self.db = db
        self.cache = cache or CacheService()

    def toggle_subscription(self, actor_id: int, channel_id) -> SubscriptionStatus:
        """
        Subscribe the actor to a channel, or unsubscribe if already subscribed.

        Raises:
            InvalidArgumentError: malformed channel id
            PolicyViolationError: the actor targets their own channel
            NotFoundError: the channel does not exist
        """
        channel_id = parse_id(channel_id, "channel")

        # Subscribing to yourself is the one case where being the owner is denied
        if authorize(actor_id, channel_id):
            raise PolicyViolationError("You cannot subscribe to your own channel")

        if self.db.get(User, channel_id) is None:
            raise NotFoundError("Channel not found")

        keys = {"subscriber_id": actor_id, "channel_id": channel_id}

        if delete_if_present(self.db, Subscription, **keys):
            subscribed = False
        else:
            insert_if_absent(self.db, Subscription, **keys)
            subscribed = True

        self.cache.invalidate_channel_counts(actor_id, channel_id)

        engagement_logger.info(
            f"User {actor_id} {'subscribed to' if subscribed else 'unsubscribed from'} "
            f"channel {channel_id}"
        )
        return SubscriptionStatus(subscribed=subscribed)

    def get_subscriber_list(self, channel_id) -> list[OwnerSummary]:
        """Users subscribed to a channel, newest subscriber first."""
        channel_id = parse_id(channel_id, "channel")
        self._ensure_user(channel_id, "Channel not found")

        subscribers = (
            self.db.query(User)
            .join(Subscription, Subscription.subscriber_id == User.id)
            .filter(Subscription.channel_id == channel_id)
            .order_by(Subscription.created_at.desc(), Subscription.id.desc())
            .all()
        )
        return [OwnerSummary.model_validate(u) for u in subscribers]

    def get_subscribed_channels(self, subscriber_id) -> list[OwnerSummary]:
        """Channels a user is subscribed to, newest subscription first."""
        subscriber_id = parse_id(subscriber_id, "subscriber")
        self._ensure_user(subscriber_id, "Subscriber not found")

        channels = (
            self.db.query(User)
            .join(Subscription, Subscription.channel_id == User.id)
            .filter(Subscription.subscriber_id == subscriber_id)
            .order_by(Subscription.created_at.desc(), Subscription.id.desc())
            .all()
        )
        return [OwnerSummary.model_validate(u) for u in channels]

    def _ensure_user(self, user_id: int, message: str) -> None:
        if self.db.get(User, user_id) is None:
            raise NotFoundError(message)
