"""Playlists router for managing user playlists."""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user
from vidtube.models.user import User
from vidtube.schemas.common import ApiResponse
from vidtube.schemas.playlist import (
    PlaylistCreate,
    PlaylistResponse,
    PlaylistUpdate,
    PlaylistWithVideos,
)
from vidtube.services.playlist_service import PlaylistService

router = APIRouter(prefix="/playlists")


@router.post(
    "/",
    response_model=ApiResponse[PlaylistResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_playlist(
    body: PlaylistCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Create a playlist owned by the current user."""
    playlist = PlaylistService(db).create_playlist(
        current_user.id, body.name, body.description
    )
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=playlist,
        message="Playlist created successfully",
    )


@router.get("/user/{user_id}", response_model=ApiResponse[List[PlaylistResponse]])
async def get_user_playlists(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get all playlists owned by a user."""
    playlists = PlaylistService(db).get_user_playlists(
        user_id, viewer_id=current_user.id
    )
    return ApiResponse(data=playlists, message="User playlists fetched successfully")


@router.get("/{playlist_id}", response_model=ApiResponse[PlaylistWithVideos])
async def get_playlist(
    playlist_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """
    Get a specific playlist with its videos.

    Videos are returned in the order they were added.
    """
    playlist = PlaylistService(db).get_playlist_by_id(
        playlist_id, viewer_id=current_user.id
    )
    return ApiResponse(data=playlist, message="Playlist fetched successfully")


@router.patch("/{playlist_id}", response_model=ApiResponse[PlaylistResponse])
async def update_playlist(
    playlist_id: str,
    body: PlaylistUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Rename a playlist or change its description. Only supplied fields change."""
    playlist = PlaylistService(db).update_playlist(
        current_user.id, playlist_id, name=body.name, description=body.description
    )
    return ApiResponse(data=playlist, message="Playlist updated successfully")


@router.delete("/{playlist_id}", response_model=ApiResponse[dict])
async def delete_playlist(
    playlist_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Delete one of your own playlists."""
    PlaylistService(db).delete_playlist(current_user.id, playlist_id)
    return ApiResponse(data={}, message="Playlist deleted successfully")


@router.patch(
    "/add/{video_id}/{playlist_id}", response_model=ApiResponse[PlaylistResponse]
)
async def add_video_to_playlist(
    video_id: str,
    playlist_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Add a video to a playlist. Adding an existing member changes nothing."""
    playlist = PlaylistService(db).add_video_to_playlist(
        current_user.id, playlist_id, video_id
    )
    return ApiResponse(data=playlist, message="Video added to playlist successfully")


@router.patch(
    "/remove/{video_id}/{playlist_id}", response_model=ApiResponse[PlaylistResponse]
)
async def remove_video_from_playlist(
    video_id: str,
    playlist_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Remove a video from a playlist."""
    playlist = PlaylistService(db).remove_video_from_playlist(
        current_user.id, playlist_id, video_id
    )
    return ApiResponse(
        data=playlist, message="Video removed from playlist successfully"
    )
