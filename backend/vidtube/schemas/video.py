from datetime import datetime
from pydantic import BaseModel, ConfigDict

from vidtube.schemas.common import PageMeta
from vidtube.schemas.user import OwnerSummary


class VideoBase(BaseModel):
    """Base video schema."""

    title: str
    description: str
    video_file_url: str
    thumbnail_url: str
    duration_seconds: int = 0


class VideoCreate(BaseModel):
    """Schema for publishing a video. Media URLs come from the upload service."""

    title: str | None = None
    description: str | None = None
    video_file_url: str | None = None
    thumbnail_url: str | None = None
    duration_seconds: int = 0
    is_published: bool = True


class VideoResponse(VideoBase):
    """Video response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    views: int
    is_published: bool
    created_at: datetime


class VideoWithOwner(VideoResponse):
    """Video with its owner embedded as a single object."""

    owner: OwnerSummary


class VideoUpdate(BaseModel):
    """Schema for updating video."""

    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None


class VideoFilter(BaseModel):
    """Schema for filtering videos."""

    user_id: int | None = None
    text_query: str | None = None
    only_public: bool = True


class VideoSort(BaseModel):
    """Schema for sorting videos."""

    sort_by: str = "created_at"  # created_at, title, duration_seconds, views
    sort_order: str = "desc"  # asc, desc


class PaginatedVideosResponse(PageMeta):
    """Paginated response for videos."""

    items: list[VideoResponse]
    total: int


class PublishStatus(BaseModel):
    is_published: bool
