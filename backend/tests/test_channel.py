"""
Tests for channel profiles, watch history and account details.
"""

import pytest

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.models import WatchHistoryEntry
from vidtube.schemas.user import UserUpdate
from vidtube.services.channel_service import ChannelService
from vidtube.services.store import count
from vidtube.services.subscription_service import SubscriptionService


class TestChannelProfile:
    """Tests for the channel page and its counts."""

    def test_counts_and_viewer_flag(self, db, cache, alice, bob, make_user):
        carol = make_user("carol")
        dave = make_user("dave")
        subscriptions = SubscriptionService(db, cache)
        for fan in (bob, carol, dave):
            subscriptions.toggle_subscription(fan.id, alice.id)
        subscriptions.toggle_subscription(alice.id, bob.id)

        profile = ChannelService(db, cache).get_channel_profile("alice", viewer_id=bob.id)

        assert profile.subscribers_count == 3
        assert profile.subscriptions_count == 1
        assert profile.is_subscribed_by_viewer is True

    def test_username_lookup_is_case_insensitive(self, db, cache, alice):
        profile = ChannelService(db, cache).get_channel_profile("ALICE")
        assert profile.id == alice.id

    def test_anonymous_viewer_is_not_subscribed(self, db, cache, alice):
        profile = ChannelService(db, cache).get_channel_profile("alice")
        assert profile.is_subscribed_by_viewer is False
        assert profile.subscribers_count == 0

    def test_unknown_channel(self, db, cache):
        with pytest.raises(NotFoundError, match="Channel does not exist"):
            ChannelService(db, cache).get_channel_profile("nobody")

    def test_blank_username(self, db, cache):
        with pytest.raises(InvalidArgumentError):
            ChannelService(db, cache).get_channel_profile("  ")

    def test_counts_are_served_from_cache(self, db, cache, alice):
        cache.set_channel_counts(
            alice.id, {"subscribers_count": 42, "subscriptions_count": 7}
        )

        profile = ChannelService(db, cache).get_channel_profile("alice")

        assert profile.subscribers_count == 42
        assert profile.subscriptions_count == 7

    def test_viewer_flag_is_never_cached(self, db, cache, alice, bob):
        service = ChannelService(db, cache)
        before = service.get_channel_profile("alice", viewer_id=bob.id)
        assert before.is_subscribed_by_viewer is False

        SubscriptionService(db, cache).toggle_subscription(bob.id, alice.id)
        # Stale counts left in the cache
        cache.set_channel_counts(
            alice.id, {"subscribers_count": 0, "subscriptions_count": 0}
        )

        profile = service.get_channel_profile("alice", viewer_id=bob.id)
        assert profile.is_subscribed_by_viewer is True
        assert profile.subscribers_count == 0

    def test_counts_recomputed_after_invalidation(self, db, cache, alice, bob):
        service = ChannelService(db, cache)
        assert service.get_channel_profile("alice").subscribers_count == 0

        SubscriptionService(db, cache).toggle_subscription(bob.id, alice.id)

        assert service.get_channel_profile("alice").subscribers_count == 1


class TestWatchHistory:
    """Tests for recording and reading watch history."""

    def test_history_keeps_watch_order(self, db, cache, alice, bob, make_video):
        v1 = make_video(bob, "One")
        v2 = make_video(bob, "Two")
        v3 = make_video(bob, "Three")
        service = ChannelService(db, cache)
        for video in (v3, v1, v2):
            service.mark_watched(alice.id, video.id)

        history = service.get_watch_history(alice.id)

        assert [v.id for v in history] == [v3.id, v1.id, v2.id]
        assert history[0].owner.username == "bob"

    def test_rewatching_does_not_duplicate(self, db, cache, alice, bob, make_video):
        v1 = make_video(bob, "One")
        v2 = make_video(bob, "Two")
        service = ChannelService(db, cache)

        service.mark_watched(alice.id, v1.id)
        service.mark_watched(alice.id, v2.id)
        result = service.mark_watched(alice.id, str(v1.id))

        assert result.watch_history == [v1.id, v2.id]
        assert count(db, WatchHistoryEntry, user_id=alice.id) == 2

    def test_empty_history(self, db, cache, alice):
        assert ChannelService(db, cache).get_watch_history(alice.id) == []

    def test_cannot_watch_private_video_of_another_user(
        self, db, cache, alice, bob, make_video
    ):
        secret = make_video(bob, "Secret", is_published=False)
        service = ChannelService(db, cache)

        with pytest.raises(NotFoundError):
            service.mark_watched(alice.id, secret.id)
        assert service.get_watch_history(alice.id) == []
        assert count(db, WatchHistoryEntry) == 0

    def test_videos_made_private_drop_out(self, db, cache, alice, bob, make_video):
        shown = make_video(bob, "Shown")
        hidden = make_video(bob, "Hidden")
        service = ChannelService(db, cache)
        service.mark_watched(alice.id, hidden.id)
        service.mark_watched(alice.id, shown.id)

        hidden.is_published = False
        db.commit()

        assert [v.id for v in service.get_watch_history(alice.id)] == [shown.id]
        assert service.mark_watched(alice.id, shown.id).watch_history == [shown.id]

    def test_owner_keeps_own_private_video(self, db, cache, bob, make_video):
        draft = make_video(bob, "Draft", is_published=False)
        service = ChannelService(db, cache)

        service.mark_watched(bob.id, draft.id)

        assert [v.id for v in service.get_watch_history(bob.id)] == [draft.id]

    def test_mark_missing_video(self, db, cache, alice):
        with pytest.raises(NotFoundError):
            ChannelService(db, cache).mark_watched(alice.id, 500)


class TestAccountDetails:
    def test_update(self, db, cache, alice):
        user = ChannelService(db, cache).update_account_details(
            alice.id, UserUpdate(email="Alice.New@Example.com", display_name="Ali")
        )

        assert user.email == "alice.new@example.com"
        assert user.display_name == "Ali"

    def test_both_fields_required(self, db, cache, alice):
        with pytest.raises(InvalidArgumentError):
            ChannelService(db, cache).update_account_details(
                alice.id, UserUpdate(display_name="Ali")
            )

    def test_email_taken(self, db, cache, alice, bob):
        with pytest.raises(InvalidArgumentError, match="Email already in use"):
            ChannelService(db, cache).update_account_details(
                alice.id, UserUpdate(email=bob.email, display_name="Ali")
            )
