"""Videos router for the video feed and video management."""

from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user, get_optional_user
from vidtube.models.user import User
from vidtube.schemas.common import ApiResponse
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
from vidtube.services.video_service import VideoService

router = APIRouter(prefix="/videos")


@router.get("/", response_model=ApiResponse[PaginatedVideosResponse])
async def get_all_videos(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_optional_user)],
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    query: str | None = Query(None, description="Search in title and description"),
    user_id: int | None = Query(None, description="Only videos owned by this user"),
    only_public: bool = Query(True, description="Exclude your private videos"),
    sort_by: str = Query("created_at", description="Sort field"),
    sort_type: str = Query("desc", description="asc or desc"),
):
    """
    Get videos with filtering, sorting, and pagination.

    Supports:
    - Filtering by owner and a text query over title and description
    - Sorting by created_at, title, duration_seconds, views
    - Pagination with total count
    """
    result = VideoService(db).list_videos(
        filters=VideoFilter(user_id=user_id, text_query=query, only_public=only_public),
        sort=VideoSort(sort_by=sort_by, sort_order=sort_type),
        page=page,
        page_size=limit,
        viewer_id=current_user.id if current_user else None,
    )
    return ApiResponse(data=result, message="Videos fetched successfully")


@router.post(
    "/",
    response_model=ApiResponse[VideoResponse],
    status_code=status.HTTP_201_CREATED,
)
async def publish_video(
    body: VideoCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """
    Publish a video.

    The video file and thumbnail must already be uploaded; the body carries
    their URLs.
    """
    video = VideoService(db).publish_video(current_user.id, body)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=video,
        message="Video published successfully",
    )


@router.get("/{video_id}", response_model=ApiResponse[VideoWithOwner])
async def get_video(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_optional_user)],
):
    """Get a specific video by ID."""
    video = VideoService(db).get_video(
        video_id, viewer_id=current_user.id if current_user else None
    )
    return ApiResponse(data=video, message="Video fetched successfully")


@router.patch("/{video_id}", response_model=ApiResponse[VideoResponse])
async def update_video(
    video_id: str,
    body: VideoUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Update title, description or thumbnail of one of your videos."""
    video = VideoService(db).update_video(current_user.id, video_id, body)
    return ApiResponse(data=video, message="Video updated successfully")


@router.delete("/{video_id}", response_model=ApiResponse[dict])
async def delete_video(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Delete one of your videos along with its comments and likes."""
    VideoService(db).delete_video(current_user.id, video_id)
    return ApiResponse(data={}, message="Video deleted successfully")


@router.patch("/toggle/publish/{video_id}", response_model=ApiResponse[PublishStatus])
async def toggle_publish_status(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Flip a video between published and private."""
    result = VideoService(db).toggle_publish_status(current_user.id, video_id)
    return ApiResponse(data=result, message="Publish status toggled successfully")
