"""Video feed plus owner-only video management."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.logger import api_logger
from vidtube.models import Video
from vidtube.schemas.video import (
    PaginatedVideosResponse,
    PublishStatus,
    VideoCreate,
    VideoFilter,
    VideoResponse,
    VideoSort,
    VideoUpdate,
    VideoWithOwner,
)
from vidtube.services.authorization import ensure_owner
from vidtube.services.store import normalize_page, page_meta, paginate
from vidtube.services.validation import optional_text, parse_id, require_text
from vidtube.services.visibility import get_visible_video, visible_to

SORTABLE_FIELDS = {
    "created_at": Video.created_at,
    "title": Video.title,
    "duration_seconds": Video.duration_seconds,
    "views": Video.views,
}

NO_PERMISSION = "You do not have permission to modify this video"


class VideoService:
    """Service for listing, publishing and managing videos."""

    def __init__(self, db: Session):
        self.db = db

    def list_videos(
        self,
        filters: VideoFilter | None = None,
        sort: VideoSort | None = None,
        page: int = 1,
        page_size: int | None = None,
        viewer_id: int | None = None,
    ) -> PaginatedVideosResponse:
        """
        Get videos with filtering, sorting, and pagination.

        Filters are applied together. With ``only_public`` off, private videos
        are still restricted to the viewer's own.
        """
        filters = filters or VideoFilter()
        sort = sort or VideoSort()
        page, page_size = normalize_page(page, page_size)

        query = self.db.query(Video)

        if filters.user_id is not None:
            query = query.filter(Video.owner_id == parse_id(filters.user_id, "user"))

        search = optional_text(filters.text_query)
        if search:
            search_term = f"%{search}%"
            query = query.filter(
                or_(
                    Video.title.ilike(search_term),
                    Video.description.ilike(search_term),
                )
            )

        query = query.filter(visible_to(None if filters.only_public else viewer_id))

        sort_column = SORTABLE_FIELDS.get(sort.sort_by)
        if sort_column is None:
            raise InvalidArgumentError(f"Cannot sort videos by '{sort.sort_by}'")
        if sort.sort_order == "desc":
            query = query.order_by(sort_column.desc(), Video.id.desc())
        elif sort.sort_order == "asc":
            query = query.order_by(sort_column.asc(), Video.id.asc())
        else:
            raise InvalidArgumentError("Sort order must be 'asc' or 'desc'")

        videos, total = paginate(query, page, page_size)

        return PaginatedVideosResponse(
            items=[VideoResponse.model_validate(v) for v in videos],
            total=total,
            **page_meta(page, page_size, total),
        )

    def publish_video(self, actor_id: int, payload: VideoCreate) -> VideoResponse:
        title = require_text(payload.title, "Title and description are required")
        description = require_text(
            payload.description, "Title and description are required"
        )
        video_file_url = require_text(payload.video_file_url, "Video file is required")
        thumbnail_url = require_text(payload.thumbnail_url, "Thumbnail is required")
        if payload.duration_seconds < 0:
            raise InvalidArgumentError("Duration cannot be negative")

        video = Video(
            owner_id=actor_id,
            title=title,
            description=description,
            video_file_url=video_file_url,
            thumbnail_url=thumbnail_url,
            duration_seconds=payload.duration_seconds,
            is_published=payload.is_published,
        )
        self.db.add(video)
        self.db.commit()
        self.db.refresh(video)

        api_logger.info(f"User {actor_id} published video {video.id}")
        return VideoResponse.model_validate(video)

    def get_video(self, video_id, viewer_id: int | None = None) -> VideoWithOwner:
        """Get a video with its owner. Private videos are visible to their owner only."""
        video = get_visible_video(self.db, parse_id(video_id, "video"), viewer_id)
        return VideoWithOwner.model_validate(video)

    def update_video(
        self, actor_id: int, video_id, payload: VideoUpdate
    ) -> VideoResponse:
        video = self._get_video(parse_id(video_id, "video"))
        ensure_owner(actor_id, video, NO_PERMISSION)

        updated_fields = {
            field: optional_text(getattr(payload, field))
            for field in ("title", "description", "thumbnail_url")
            if optional_text(getattr(payload, field))
        }
        if not updated_fields:
            raise InvalidArgumentError("No valid fields provided for update")

        for field, value in updated_fields.items():
            setattr(video, field, value)
        self.db.commit()
        self.db.refresh(video)

        api_logger.info(f"User {actor_id} updated video {video.id}")
        return VideoResponse.model_validate(video)

    def delete_video(self, actor_id: int, video_id) -> None:
        video = self._get_video(parse_id(video_id, "video"))
        ensure_owner(actor_id, video, NO_PERMISSION)

        self.db.delete(video)
        self.db.commit()
        api_logger.info(f"User {actor_id} deleted video {video_id}")

    def toggle_publish_status(self, actor_id: int, video_id) -> PublishStatus:
        video = self._get_video(parse_id(video_id, "video"))
        ensure_owner(actor_id, video, NO_PERMISSION)

        video.is_published = not video.is_published
        self.db.commit()

        api_logger.info(
            f"User {actor_id} set video {video.id} published={video.is_published}"
        )
        return PublishStatus(is_published=video.is_published)

    def _get_video(self, video_id: int) -> Video:
        video = self.db.get(Video, video_id)
        if video is None:
            raise NotFoundError("Video not found")
        return video
