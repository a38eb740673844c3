"""Comment lifecycle and the per-video comment feed."""

from sqlalchemy.orm import Session, contains_eager

from vidtube.exceptions import NotFoundError
from vidtube.logger import engagement_logger
from vidtube.models import Comment
from vidtube.schemas.comment import (
    CommentResponse,
    CommentWithOwner,
    PaginatedCommentsResponse,
)
from vidtube.services.authorization import ensure_owner
from vidtube.services.store import normalize_page, page_meta, paginate
from vidtube.services.validation import parse_id, require_text
from vidtube.services.visibility import get_visible_video

EMPTY_COMMENT = "Comment content cannot be empty"


class CommentService:
    """Service for adding, editing, deleting and listing comments."""

    def __init__(self, db: Session):
        self.db = db

    def add_comment(self, actor_id: int, video_id, content: str | None) -> CommentResponse:
        video_id = parse_id(video_id, "video")
        content = require_text(content, EMPTY_COMMENT)

        get_visible_video(self.db, video_id, actor_id)

        comment = Comment(content=content, video_id=video_id, owner_id=actor_id)
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)

        engagement_logger.info(
            f"User {actor_id} commented on video {video_id} (comment {comment.id})"
        )
        return CommentResponse.model_validate(comment)

    def update_comment(
        self, actor_id: int, comment_id, content: str | None
    ) -> CommentResponse:
        comment_id = parse_id(comment_id, "comment")
        comment = self._get_comment(comment_id)
        ensure_owner(actor_id, comment, "You can not update this comment")
        comment.content = require_text(content, EMPTY_COMMENT)

        self.db.commit()
        self.db.refresh(comment)

        engagement_logger.info(f"User {actor_id} updated comment {comment_id}")
        return CommentResponse.model_validate(comment)

    def delete_comment(self, actor_id: int, comment_id) -> None:
        comment_id = parse_id(comment_id, "comment")
        comment = self._get_comment(comment_id)
        ensure_owner(actor_id, comment, "You can not delete this comment")

        self.db.delete(comment)
        self.db.commit()

        engagement_logger.info(f"User {actor_id} deleted comment {comment_id}")

    def list_video_comments(
        self,
        video_id,
        page: int = 1,
        page_size: int | None = None,
        viewer_id: int | None = None,
    ) -> PaginatedCommentsResponse:
        """
        Page through a video's comments, newest first, each with its author.

        A video without comments yields an empty page; a missing video, or
        another user's private one, is NotFound.
        """
        video_id = parse_id(video_id, "video")
        page, page_size = normalize_page(page, page_size)

        get_visible_video(self.db, video_id, viewer_id)

        query = (
            self.db.query(Comment)
            .join(Comment.owner)
            .options(contains_eager(Comment.owner))
            .filter(Comment.video_id == video_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        comments, total = paginate(query, page, page_size)

        return PaginatedCommentsResponse(
            comments=[CommentWithOwner.model_validate(c) for c in comments],
            total_comments=total,
            **page_meta(page, page_size, total),
        )

    def _get_comment(self, comment_id: int) -> Comment:
        comment = self.db.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        return comment
