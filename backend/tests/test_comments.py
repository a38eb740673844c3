"""
Tests for the comment lifecycle and the per-video comment feed.
"""

import pytest

from vidtube.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from vidtube.models import Comment, Like
from vidtube.services.comment_service import CommentService
from vidtube.services.like_service import LikeService
from vidtube.services.store import count


class TestAddComment:
    def test_add_comment(self, db, alice, bob, make_video):
        video = make_video(bob, "Cats")

        comment = CommentService(db).add_comment(alice.id, str(video.id), "  Lovely  ")

        assert comment.content == "Lovely"
        assert comment.owner_id == alice.id
        assert comment.video_id == video.id

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_content_rejected(self, db, alice, bob, make_video, content):
        video = make_video(bob, "Cats")
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            CommentService(db).add_comment(alice.id, video.id, content)
        assert count(db, Comment) == 0

    def test_private_video_of_another_user(self, db, alice, bob, make_video):
        video = make_video(bob, "Secret", is_published=False)

        with pytest.raises(NotFoundError, match="Video not found"):
            CommentService(db).add_comment(alice.id, video.id, "Found it")
        assert count(db, Comment) == 0

    def test_missing_video(self, db, alice):
        with pytest.raises(NotFoundError, match="Video not found"):
            CommentService(db).add_comment(alice.id, 77, "Hello")


class TestUpdateAndDeleteComment:
    """Only the author may edit or delete a comment."""

    def test_author_updates(self, db, alice, bob, make_video, make_comment):
        comment = make_comment(alice, make_video(bob, "Cats"), "Old")

        updated = CommentService(db).update_comment(alice.id, comment.id, "New")

        assert updated.content == "New"

    def test_non_author_cannot_update(self, db, alice, bob, make_video, make_comment):
        comment = make_comment(alice, make_video(bob, "Cats"), "Old")

        with pytest.raises(ForbiddenError, match="can not update"):
            CommentService(db).update_comment(bob.id, comment.id, "Hijacked")

        db.expire_all()
        assert db.get(Comment, comment.id).content == "Old"

    def test_update_with_empty_content(self, db, alice, bob, make_video, make_comment):
        comment = make_comment(alice, make_video(bob, "Cats"), "Old")
        with pytest.raises(InvalidArgumentError):
            CommentService(db).update_comment(alice.id, comment.id, " ")

    def test_update_missing_comment(self, db, alice):
        with pytest.raises(NotFoundError, match="Comment not found"):
            CommentService(db).update_comment(alice.id, 5, "x")

    def test_author_deletes_with_likes(self, db, alice, bob, make_video, make_comment):
        comment = make_comment(alice, make_video(bob, "Cats"))
        LikeService(db).toggle_comment_like(bob.id, comment.id)

        CommentService(db).delete_comment(alice.id, comment.id)

        assert count(db, Comment) == 0
        assert count(db, Like) == 0

    def test_non_author_cannot_delete(self, db, alice, bob, make_video, make_comment):
        comment = make_comment(alice, make_video(bob, "Cats"))

        with pytest.raises(ForbiddenError):
            CommentService(db).delete_comment(bob.id, comment.id)

        assert count(db, Comment) == 1


class TestListVideoComments:
    def test_newest_first_with_owner(self, db, alice, bob, make_video, make_comment):
        video = make_video(bob, "Cats")
        older = make_comment(alice, video, "one")
        newer = make_comment(bob, video, "two")

        page = CommentService(db).list_video_comments(video.id)

        assert [c.id for c in page.comments] == [newer.id, older.id]
        assert page.comments[1].owner.username == "alice"
        assert page.total_comments == 2

    def test_paginates(self, db, alice, bob, make_video, make_comment):
        video = make_video(bob, "Cats")
        for i in range(12):
            make_comment(alice, video, f"c{i}")

        page = CommentService(db).list_video_comments(video.id, page=2, page_size=10)

        assert len(page.comments) == 2
        assert page.total_comments == 12
        assert page.total_pages == 2

    def test_video_without_comments_is_empty_page(self, db, bob, make_video):
        video = make_video(bob, "Quiet")

        page = CommentService(db).list_video_comments(video.id)

        assert page.comments == []
        assert page.total_comments == 0

    def test_missing_video(self, db):
        with pytest.raises(NotFoundError):
            CommentService(db).list_video_comments(31)

    def test_private_video_comments_hidden_from_others(
        self, db, alice, bob, make_video, make_comment
    ):
        video = make_video(bob, "Secret", is_published=False)
        make_comment(bob, video, "note to self")
        service = CommentService(db)

        with pytest.raises(NotFoundError):
            service.list_video_comments(video.id, viewer_id=alice.id)
        with pytest.raises(NotFoundError):
            service.list_video_comments(video.id)
        own = service.list_video_comments(video.id, viewer_id=bob.id)
        assert own.total_comments == 1
