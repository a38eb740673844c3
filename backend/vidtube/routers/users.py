"""Users router for account details, channel pages and watch history."""

from typing import Annotated, List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user, get_optional_user
from vidtube.models.user import User
from vidtube.schemas.common import ApiResponse
from vidtube.schemas.user import (
    ChannelProfile,
    UserResponse,
    UserUpdate,
    WatchHistoryIds,
)
from vidtube.schemas.video import VideoWithOwner
from vidtube.services.channel_service import ChannelService

router = APIRouter(prefix="/users")


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_current_account(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's account."""
    return ApiResponse(
        data=UserResponse.model_validate(current_user),
        message="Current user fetched successfully",
    )


@router.patch("/me", response_model=ApiResponse[UserResponse])
async def update_account_details(
    body: UserUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Update email and display name."""
    user = ChannelService(db).update_account_details(current_user.id, body)
    return ApiResponse(data=user, message="Account details updated successfully")


@router.get("/c/{username}", response_model=ApiResponse[ChannelProfile])
async def get_channel_profile(
    username: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_optional_user)],
):
    """
    Get a channel page by username.

    Includes subscriber and subscription counts, and whether the caller
    is subscribed.
    """
    profile = ChannelService(db).get_channel_profile(
        username, viewer_id=current_user.id if current_user else None
    )
    return ApiResponse(data=profile, message="User channel fetched successfully")


@router.get("/history", response_model=ApiResponse[List[VideoWithOwner]])
async def get_watch_history(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's watched videos in watch order."""
    history = ChannelService(db).get_watch_history(current_user.id)
    return ApiResponse(data=history, message="Watch history fetched successfully")


@router.post("/history/{video_id}", response_model=ApiResponse[WatchHistoryIds])
async def add_to_watch_history(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Record that the current user watched a video."""
    result = ChannelService(db).mark_watched(current_user.id, video_id)
    return ApiResponse(
        data=result, message="Video added to watch history successfully"
    )
