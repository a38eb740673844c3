from datetime import datetime
from pydantic import BaseModel, EmailStr, ConfigDict


class OwnerSummary(BaseModel):
    """Public projection of a user embedded in videos and subscriber lists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    display_name: str
    avatar_url: str | None = None


class CommentOwner(BaseModel):
    """Projection of a comment's author."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    avatar_url: str | None = None


class UserResponse(BaseModel):
    """User response schema. Credentials are never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    display_name: str
    avatar_url: str | None = None
    cover_image_url: str | None = None
    created_at: datetime


class UserUpdate(BaseModel):
    """Schema for updating account details."""

    email: EmailStr | None = None
    display_name: str | None = None


class ChannelProfile(BaseModel):
    """Channel page: user projection plus subscription counts."""

    id: int
    username: str
    display_name: str
    email: str
    avatar_url: str | None = None
    cover_image_url: str | None = None
    subscribers_count: int
    subscriptions_count: int
    is_subscribed_by_viewer: bool


class WatchHistoryIds(BaseModel):
    """Ordered identifiers of the videos a user has watched."""

    watch_history: list[int]
