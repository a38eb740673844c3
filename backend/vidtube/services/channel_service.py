"""Read-side channel views: profile with counts, watch history, account details."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.logger import api_logger
from vidtube.models import Subscription, User, Video, WatchHistoryEntry
from vidtube.schemas.user import (
    ChannelProfile,
    UserResponse,
    UserUpdate,
    WatchHistoryIds,
)
from vidtube.schemas.video import VideoWithOwner
from vidtube.services.cache import CacheService
from vidtube.services.store import count, exists, insert_if_absent
from vidtube.services.validation import parse_id, require_text
from vidtube.services.visibility import get_visible_video, visible_to


class ChannelService:
    """Service composing user-centric views."""

    def __init__(self, db: Session, cache: CacheService | None = None):
        self.db = db
        self.cache = cache or CacheService()

    def get_channel_profile(
        self, username: str | None, viewer_id: int | None = None
    ) -> ChannelProfile:
        """
        Get a channel page by username.

        Counts are computed in the store and cached briefly; whether the
        viewer is subscribed is always read fresh.
        """
        username = require_text(username, "Username is missing").lower()

        user = self.db.query(User).filter(User.username == username).first()
        if user is None:
            raise NotFoundError("Channel does not exist")

        counts = self.cache.get_channel_counts(user.id)
        if counts is None:
            counts = {
                "subscribers_count": count(self.db, Subscription, channel_id=user.id),
                "subscriptions_count": count(
                    self.db, Subscription, subscriber_id=user.id
                ),
            }
            self.cache.set_channel_counts(user.id, counts)

        is_subscribed = viewer_id is not None and exists(
            self.db, Subscription, subscriber_id=viewer_id, channel_id=user.id
        )

        return ChannelProfile(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            email=user.email,
            avatar_url=user.avatar_url,
            cover_image_url=user.cover_image_url,
            subscribers_count=counts["subscribers_count"],
            subscriptions_count=counts["subscriptions_count"],
            is_subscribed_by_viewer=is_subscribed,
        )

    def get_watch_history(self, user_id: int) -> list[VideoWithOwner]:
        """
        Watched videos in watch order, each with its owner embedded.

        Videos made private since they were watched drop out.
        """
        if self.db.get(User, user_id) is None:
            raise NotFoundError("User not found")

        # video -> owner is many-to-one, so the owner loads as a single object
        videos = (
            self.db.query(Video)
            .join(WatchHistoryEntry, WatchHistoryEntry.video_id == Video.id)
            .join(Video.owner)
            .options(contains_eager(Video.owner))
            .filter(WatchHistoryEntry.user_id == user_id, visible_to(user_id))
            .order_by(WatchHistoryEntry.id.asc())
            .all()
        )
        return [VideoWithOwner.model_validate(v) for v in videos]

    def mark_watched(self, actor_id: int, video_id) -> WatchHistoryIds:
        """Append a video to the actor's watch history unless already there."""
        video_id = parse_id(video_id, "video")
        get_visible_video(self.db, video_id, actor_id)

        if insert_if_absent(
            self.db, WatchHistoryEntry, user_id=actor_id, video_id=video_id
        ):
            api_logger.debug(f"User {actor_id} watched video {video_id}")

        ids = (
            self.db.query(WatchHistoryEntry.video_id)
            .join(Video, Video.id == WatchHistoryEntry.video_id)
            .filter(WatchHistoryEntry.user_id == actor_id, visible_to(actor_id))
            .order_by(WatchHistoryEntry.id.asc())
            .all()
        )
        return WatchHistoryIds(watch_history=[row.video_id for row in ids])

    def update_account_details(
        self, actor_id: int, payload: UserUpdate
    ) -> UserResponse:
        email = require_text(payload.email, "Email and display name are required")
        display_name = require_text(
            payload.display_name, "Email and display name are required"
        )

        user = self.db.get(User, actor_id)
        if user is None:
            raise NotFoundError("User not found")

        user.email = email
        user.display_name = display_name
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidArgumentError("Email already in use")

        self.db.refresh(user)
        api_logger.info(f"User {actor_id} updated account details")
        return UserResponse.model_validate(user)
