from datetime import datetime
from pydantic import BaseModel, ConfigDict

from vidtube.schemas.common import PageMeta
from vidtube.schemas.user import CommentOwner


class CommentContent(BaseModel):
    """Request body for adding or editing a comment."""

    content: str | None = None


class CommentResponse(BaseModel):
    """Comment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    video_id: int
    owner_id: int
    created_at: datetime
    updated_at: datetime


class CommentWithOwner(BaseModel):
    """Comment as shown in a video's comment feed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    created_at: datetime
    owner: CommentOwner


class PaginatedCommentsResponse(PageMeta):
    """A page of a video's comments, newest first."""

    comments: list[CommentWithOwner]
    total_comments: int
