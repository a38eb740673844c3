"""
Tests for like toggles and the liked-videos feed.
"""

import pytest
from sqlalchemy import delete

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.models import Like, Video
from vidtube.services import like_service
from vidtube.services.like_service import LikeService
from vidtube.services.store import count


class TestToggleVideoLike:
    """Tests for liking and unliking videos."""

    def test_first_toggle_likes(self, db, alice, bob, make_video):
        video = make_video(bob, "Cats")

        result = LikeService(db).toggle_video_like(alice.id, str(video.id))

        assert result.liked is True
        assert count(db, Like, liked_by_id=alice.id, video_id=video.id) == 1

    def test_second_toggle_unlikes(self, db, alice, bob, make_video):
        video = make_video(bob, "Cats")
        service = LikeService(db)

        service.toggle_video_like(alice.id, video.id)
        result = service.toggle_video_like(alice.id, video.id)

        assert result.liked is False
        assert count(db, Like, video_id=video.id) == 0

    def test_repeated_toggles_never_duplicate(self, db, alice, bob, make_video):
        """Parity of the toggle count decides the final state."""
        video = make_video(bob, "Cats")
        service = LikeService(db)

        for _ in range(5):
            service.toggle_video_like(alice.id, video.id)

        assert count(db, Like, liked_by_id=alice.id, video_id=video.id) == 1

    def test_likes_are_per_user(self, db, alice, bob, make_video):
        video = make_video(bob, "Cats")
        service = LikeService(db)

        service.toggle_video_like(alice.id, video.id)
        service.toggle_video_like(bob.id, video.id)

        assert count(db, Like, video_id=video.id) == 2

    def test_concurrent_first_like_keeps_single_row(
        self, db, alice, bob, make_video, monkeypatch
    ):
        """A like created between our delete and insert still reports liked."""
        video = make_video(bob, "Cats")
        db.add(Like(liked_by_id=alice.id, video_id=video.id))
        db.commit()
        monkeypatch.setattr(
            like_service, "delete_if_present", lambda *args, **kwargs: False
        )

        result = LikeService(db).toggle_video_like(alice.id, video.id)

        assert result.liked is True
        assert count(db, Like, liked_by_id=alice.id, video_id=video.id) == 1

    def test_video_deleted_before_insert(
        self, db, alice, bob, make_video, monkeypatch
    ):
        """A target removed mid-toggle is reported missing, never as liked."""
        video_id = make_video(bob, "Cats").id

        def delete_target_instead(session, model, **criteria):
            session.execute(delete(Video).where(Video.id == video_id))
            session.commit()
            return False

        monkeypatch.setattr(like_service, "delete_if_present", delete_target_instead)

        with pytest.raises(NotFoundError):
            LikeService(db).toggle_video_like(alice.id, video_id)
        assert count(db, Like) == 0

    def test_private_video_of_another_user(self, db, alice, bob, make_video):
        video = make_video(bob, "Secret", is_published=False)

        with pytest.raises(NotFoundError):
            LikeService(db).toggle_video_like(alice.id, video.id)
        assert count(db, Like) == 0

    def test_owner_can_like_own_private_video(self, db, bob, make_video):
        video = make_video(bob, "Draft", is_published=False)
        assert LikeService(db).toggle_video_like(bob.id, video.id).liked is True

    def test_malformed_id(self, db, alice):
        with pytest.raises(InvalidArgumentError, match="Invalid video ID"):
            LikeService(db).toggle_video_like(alice.id, "not-an-id")

    def test_missing_video(self, db, alice):
        with pytest.raises(NotFoundError, match="Video not found"):
            LikeService(db).toggle_video_like(alice.id, 999)
        assert count(db, Like) == 0


class TestToggleCommentLike:
    """Tests for liking and unliking comments."""

    def test_toggle_comment_like(self, db, alice, bob, make_video, make_comment):
        video = make_video(bob, "Cats")
        comment = make_comment(bob, video, "First!")
        service = LikeService(db)

        assert service.toggle_comment_like(alice.id, comment.id).liked is True
        assert count(db, Like, comment_id=comment.id) == 1
        assert service.toggle_comment_like(alice.id, comment.id).liked is False
        assert count(db, Like, comment_id=comment.id) == 0

    def test_comment_and_video_likes_are_independent(
        self, db, alice, bob, make_video, make_comment
    ):
        video = make_video(bob, "Cats")
        comment = make_comment(bob, video)
        service = LikeService(db)

        service.toggle_video_like(alice.id, video.id)
        service.toggle_comment_like(alice.id, comment.id)

        assert count(db, Like, liked_by_id=alice.id) == 2

    def test_comment_on_private_video(
        self, db, alice, bob, make_video, make_comment
    ):
        video = make_video(bob, "Secret", is_published=False)
        comment = make_comment(bob, video)

        with pytest.raises(NotFoundError, match="Comment not found"):
            LikeService(db).toggle_comment_like(alice.id, comment.id)

    def test_missing_comment(self, db, alice):
        with pytest.raises(NotFoundError, match="Comment not found"):
            LikeService(db).toggle_comment_like(alice.id, 12)

    def test_unknown_target_kind(self, db, alice):
        with pytest.raises(InvalidArgumentError):
            LikeService(db).toggle_like(alice.id, "playlist", 1)


class TestLikedVideos:
    """Tests for the liked-videos feed."""

    def test_most_recent_like_first(self, db, alice, bob, make_video):
        first = make_video(bob, "First")
        second = make_video(bob, "Second")
        service = LikeService(db)

        service.toggle_video_like(alice.id, first.id)
        service.toggle_video_like(alice.id, second.id)

        page = service.list_liked_videos(alice.id)

        assert [v.id for v in page.items] == [second.id, first.id]
        assert page.total == 2

    def test_comment_likes_are_not_listed(
        self, db, alice, bob, make_video, make_comment
    ):
        video = make_video(bob, "Cats")
        comment = make_comment(bob, video)
        LikeService(db).toggle_comment_like(alice.id, comment.id)

        page = LikeService(db).list_liked_videos(alice.id)

        assert page.items == []
        assert page.total == 0

    def test_videos_made_private_drop_out(self, db, alice, bob, make_video):
        shown = make_video(bob, "Shown")
        hidden = make_video(bob, "Hidden")
        service = LikeService(db)
        service.toggle_video_like(alice.id, shown.id)
        service.toggle_video_like(alice.id, hidden.id)

        hidden.is_published = False
        db.commit()

        page = service.list_liked_videos(alice.id)

        assert [v.id for v in page.items] == [shown.id]
        assert page.total == 1

    def test_paginates(self, db, alice, bob, make_video):
        service = LikeService(db)
        for i in range(3):
            service.toggle_video_like(alice.id, make_video(bob, f"V{i}").id)

        page = service.list_liked_videos(alice.id, page=2, page_size=2)

        assert len(page.items) == 1
        assert page.total == 3
        assert page.has_prev_page is True
        assert page.has_next_page is False
