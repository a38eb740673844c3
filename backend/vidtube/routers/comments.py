"""Comments router for video comments."""

from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user
from vidtube.models.user import User
from vidtube.schemas.comment import (
    CommentContent,
    CommentResponse,
    PaginatedCommentsResponse,
)
from vidtube.schemas.common import ApiResponse
from vidtube.services.comment_service import CommentService

router = APIRouter(prefix="/comments")


@router.get("/{video_id}", response_model=ApiResponse[PaginatedCommentsResponse])
async def get_video_comments(
    video_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    """
    Get a page of a video's comments, newest first.

    Each comment carries its author's id, username and avatar.
    """
    result = CommentService(db).list_video_comments(
        video_id, page, limit, viewer_id=current_user.id
    )
    return ApiResponse(
        data=result,
        message=(
            "Comments fetched successfully"
            if result.comments
            else "No comments found for this video"
        ),
    )


@router.post(
    "/{video_id}",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    video_id: str,
    body: CommentContent,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Add a comment to a video."""
    comment = CommentService(db).add_comment(current_user.id, video_id, body.content)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=comment,
        message="Successfully added comment",
    )


@router.patch("/c/{comment_id}", response_model=ApiResponse[CommentResponse])
async def update_comment(
    comment_id: str,
    body: CommentContent,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Edit one of your own comments."""
    comment = CommentService(db).update_comment(
        current_user.id, comment_id, body.content
    )
    return ApiResponse(data=comment, message="Comment updated successfully")


@router.delete("/c/{comment_id}", response_model=ApiResponse[dict])
async def delete_comment(
    comment_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Delete one of your own comments."""
    CommentService(db).delete_comment(current_user.id, comment_id)
    return ApiResponse(data={}, message="Comment deleted successfully")
