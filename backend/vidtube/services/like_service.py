"""Like toggles for videos and comments, and the liked-videos feed."""

from sqlalchemy.orm import Session

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.logger import engagement_logger
from vidtube.models import Comment, Like, Video
from vidtube.schemas.engagement import LikeStatus
from vidtube.schemas.video import PaginatedVideosResponse, VideoResponse
from vidtube.services.store import (
    delete_if_present,
    insert_if_absent,
    normalize_page,
    page_meta,
    paginate,
)
from vidtube.services.validation import parse_id
from vidtube.services.visibility import is_visible, visible_to

# target kind -> (model, column on Like)
LIKE_TARGETS = {
    "video": (Video, "video_id"),
    "comment": (Comment, "comment_id"),
}


class LikeService:
    """Service for liking and unliking videos and comments."""

    def __init__(self, db: Session):
        self.db = db

    def toggle_like(self, actor_id: int, target_kind: str, target_id) -> LikeStatus:
        """
        Flip the actor's like on a target.

        The like row is removed with a single DELETE if present, otherwise
        inserted under the (liker, target) unique constraint. A concurrent
        duplicate insert loses on the constraint and the target stays liked.

        Args:
            actor_id: Authenticated user's id
            target_kind: "video" or "comment"
            target_id: Raw identifier of the target

        Returns:
            LikeStatus with the state after the toggle
        """
        if target_kind not in LIKE_TARGETS:
            raise InvalidArgumentError(f"Unsupported like target '{target_kind}'")

        model, column = LIKE_TARGETS[target_kind]
        target_id = parse_id(target_id, target_kind)

        target = self.db.get(model, target_id)
        # A comment is only reachable through a video the actor may see
        video = target if target_kind == "video" else getattr(target, "video", None)
        if target is None or not is_visible(video, actor_id):
            raise NotFoundError(f"{target_kind.capitalize()} not found")

        keys = {"liked_by_id": actor_id, column: target_id}

        if delete_if_present(self.db, Like, **keys):
            engagement_logger.info(
                f"User {actor_id} unliked {target_kind} {target_id}"
            )
            return LikeStatus(liked=False)

        if not insert_if_absent(self.db, Like, **keys):
            engagement_logger.debug(
                f"Like on {target_kind} {target_id} by user {actor_id} "
                "was created by a concurrent request"
            )
        engagement_logger.info(f"User {actor_id} liked {target_kind} {target_id}")
        return LikeStatus(liked=True)

    def toggle_video_like(self, actor_id: int, video_id) -> LikeStatus:
        return self.toggle_like(actor_id, "video", video_id)

    def toggle_comment_like(self, actor_id: int, comment_id) -> LikeStatus:
        return self.toggle_like(actor_id, "comment", comment_id)

    def list_liked_videos(
        self, actor_id: int, page: int = 1, page_size: int | None = None
    ) -> PaginatedVideosResponse:
        """Videos the actor has liked and can still see, most recently liked first."""
        page, page_size = normalize_page(page, page_size)

        query = (
            self.db.query(Video)
            .join(Like, Like.video_id == Video.id)
            .filter(Like.liked_by_id == actor_id, visible_to(actor_id))
            .order_by(Like.created_at.desc(), Like.id.desc())
        )
        videos, total = paginate(query, page, page_size)

        return PaginatedVideosResponse(
            items=[VideoResponse.model_validate(v) for v in videos],
            total=total,
            **page_meta(page, page_size, total),
        )
