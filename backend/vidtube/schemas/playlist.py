from datetime import datetime
from pydantic import BaseModel, ConfigDict

from vidtube.schemas.video import VideoResponse


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist."""

    name: str | None = None
    description: str | None = None


class PlaylistResponse(BaseModel):
    """Playlist response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    name: str
    description: str
    video_ids: list[int] = []
    created_at: datetime
    updated_at: datetime


class PlaylistWithVideos(PlaylistResponse):
    """Playlist with videos."""

    videos: list[VideoResponse] = []


class PlaylistUpdate(BaseModel):
    """Schema for updating playlist."""

    name: str | None = None
    description: str | None = None
