"""Likes router for toggling likes and listing liked videos."""

from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user
from vidtube.models.user import User
from vidtube.schemas.common import ApiResponse
from vidtube.schemas.engagement import LikeStatus
from vidtube.schemas.video import PaginatedVideosResponse
from vidtube.services.like_service import LikeService

router = APIRouter(prefix="/likes")


@router.post("/toggle/v/{video_id}", response_model=ApiResponse[LikeStatus])
async def toggle_video_like(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Like a video, or remove the like if it is already liked."""
    result = LikeService(db).toggle_video_like(current_user.id, video_id)
    return ApiResponse(
        data=result,
        message="Video liked successfully" if result.liked else "Like removed successfully",
    )


@router.post("/toggle/c/{comment_id}", response_model=ApiResponse[LikeStatus])
async def toggle_comment_like(
    comment_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Like a comment, or remove the like if it is already liked."""
    result = LikeService(db).toggle_comment_like(current_user.id, comment_id)
    return ApiResponse(
        data=result,
        message=(
            "Comment liked successfully" if result.liked else "Like removed successfully"
        ),
    )


@router.get("/videos", response_model=ApiResponse[PaginatedVideosResponse])
async def get_liked_videos(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    """Get videos liked by the current user, most recent like first."""
    result = LikeService(db).list_liked_videos(current_user.id, page, limit)
    return ApiResponse(
        data=result,
        message=(
            "Liked videos fetched successfully"
            if result.total
            else "User has not liked any videos yet"
        ),
    )
