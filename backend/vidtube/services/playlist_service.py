"""Playlist management with owner-only mutation and set-like membership."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.logger import api_logger
from vidtube.models import Playlist, PlaylistVideo, User
from vidtube.schemas.playlist import PlaylistResponse, PlaylistWithVideos
from vidtube.schemas.video import VideoResponse
from vidtube.services.authorization import ensure_owner
from vidtube.services.store import delete_if_present, insert_if_absent
from vidtube.services.validation import optional_text, parse_id, require_text
from vidtube.services.visibility import get_visible_video, is_visible

NO_PERMISSION = "You do not have permission to modify this playlist"


class PlaylistService:
    """Service for creating, editing and curating playlists."""

    def __init__(self, db: Session):
        self.db = db

    def create_playlist(
        self, actor_id: int, name: str | None, description: str | None
    ) -> PlaylistResponse:
        name = require_text(name, "Name and description are required")
        description = require_text(description, "Name and description are required")

        playlist = Playlist(name=name, description=description, owner_id=actor_id)
        self.db.add(playlist)
        self.db.commit()
        self.db.refresh(playlist)

        api_logger.info(f"User {actor_id} created playlist {playlist.id}")
        return PlaylistResponse.model_validate(playlist)

    def get_user_playlists(
        self, user_id, viewer_id: int | None = None
    ) -> list[PlaylistResponse]:
        user_id = parse_id(user_id, "user")
        if self.db.get(User, user_id) is None:
            raise NotFoundError("User not found")

        playlists = (
            self.db.query(Playlist)
            .filter(Playlist.owner_id == user_id)
            .order_by(Playlist.created_at.desc(), Playlist.id.desc())
            .all()
        )
        return [self._project(p, viewer_id) for p in playlists]

    def get_playlist_by_id(
        self, playlist_id, viewer_id: int | None = None
    ) -> PlaylistWithVideos:
        """Playlist with its member videos, in the order they were added."""
        playlist = self._get_playlist(parse_id(playlist_id, "playlist"))
        return self._project(playlist, viewer_id, PlaylistWithVideos)

    def add_video_to_playlist(
        self, actor_id: int, playlist_id, video_id
    ) -> PlaylistResponse:
        """
        Add a video to the end of a playlist.

        Adding a video that is already a member leaves the playlist unchanged.
        """
        playlist_id = parse_id(playlist_id, "playlist")
        video_id = parse_id(video_id, "video")

        playlist = self._get_playlist(playlist_id)
        ensure_owner(actor_id, playlist, NO_PERMISSION)

        get_visible_video(self.db, video_id, actor_id)

        added = insert_if_absent(
            self.db,
            PlaylistVideo,
            playlist_id=playlist_id,
            video_id=video_id,
            position=self._next_position(playlist_id),
        )
        if added:
            api_logger.info(f"Video {video_id} added to playlist {playlist_id}")

        self.db.refresh(playlist)
        return self._project(playlist, actor_id)

    def remove_video_from_playlist(
        self, actor_id: int, playlist_id, video_id
    ) -> PlaylistResponse:
        """Remove a video from a playlist. Removing a non-member is a no-op."""
        playlist_id = parse_id(playlist_id, "playlist")
        video_id = parse_id(video_id, "video")

        playlist = self._get_playlist(playlist_id)
        ensure_owner(actor_id, playlist, NO_PERMISSION)

        if delete_if_present(
            self.db, PlaylistVideo, playlist_id=playlist_id, video_id=video_id
        ):
            api_logger.info(f"Video {video_id} removed from playlist {playlist_id}")

        self.db.refresh(playlist)
        return self._project(playlist, actor_id)

    def update_playlist(
        self,
        actor_id: int,
        playlist_id,
        name: str | None = None,
        description: str | None = None,
    ) -> PlaylistResponse:
        playlist = self._get_playlist(parse_id(playlist_id, "playlist"))
        ensure_owner(actor_id, playlist, NO_PERMISSION)

        updated_fields = {}
        if optional_text(name):
            updated_fields["name"] = optional_text(name)
        if optional_text(description):
            updated_fields["description"] = optional_text(description)

        if not updated_fields:
            raise InvalidArgumentError("No valid fields provided for update")

        for field, value in updated_fields.items():
            setattr(playlist, field, value)
        self.db.commit()
        self.db.refresh(playlist)

        api_logger.info(
            f"User {actor_id} updated playlist {playlist.id}: {sorted(updated_fields)}"
        )
        return self._project(playlist, actor_id)

    def delete_playlist(self, actor_id: int, playlist_id) -> None:
        playlist = self._get_playlist(parse_id(playlist_id, "playlist"))
        ensure_owner(actor_id, playlist, NO_PERMISSION)

        self.db.delete(playlist)
        self.db.commit()
        api_logger.info(f"User {actor_id} deleted playlist {playlist_id}")

    def _get_playlist(self, playlist_id: int) -> Playlist:
        playlist = self.db.get(Playlist, playlist_id)
        if playlist is None:
            raise NotFoundError("Playlist not found")
        return playlist

    def _project(
        self, playlist: Playlist, viewer_id: int | None, schema=PlaylistResponse
    ):
        """Project a playlist, leaving out member videos the viewer may not see."""
        visible = [v for v in playlist.videos if is_visible(v, viewer_id)]
        update = {"video_ids": [v.id for v in visible]}
        if schema is PlaylistWithVideos:
            update["videos"] = [VideoResponse.model_validate(v) for v in visible]
        return schema.model_validate(playlist).model_copy(update=update)

    def _next_position(self, playlist_id: int) -> int:
        stmt = select(func.max(PlaylistVideo.position)).where(
            PlaylistVideo.playlist_id == playlist_id
        )
        current = self.db.execute(stmt).scalar()
        return 0 if current is None else current + 1
