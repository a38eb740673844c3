from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from vidtube.database import Base


class Playlist(Base):
    """User-curated playlist."""

    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    owner = relationship("User", back_populates="playlists")
    playlist_videos = relationship(
        "PlaylistVideo",
        back_populates="playlist",
        cascade="all, delete-orphan",
        order_by="PlaylistVideo.position",
    )

    @property
    def videos(self):
        """Member videos in playlist order."""
        return [pv.video for pv in self.playlist_videos]

    @property
    def video_ids(self) -> list[int]:
        return [pv.video_id for pv in self.playlist_videos]


class PlaylistVideo(Base):
    """Association table for playlist-video membership with ordering."""

    __tablename__ = "playlist_videos"

    id = Column(Integer, primary_key=True, index=True)
    playlist_id = Column(
        Integer,
        ForeignKey("playlists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_id = Column(
        Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Position in playlist
    position = Column(Integer, nullable=False)

    # Timestamps
    added_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    playlist = relationship("Playlist", back_populates="playlist_videos")
    video = relationship("Video", back_populates="playlist_videos")

    # Composite index
    __table_args__ = (
        Index("idx_playlist_video", "playlist_id", "video_id", unique=True),
        Index("idx_playlist_position", "playlist_id", "position"),
    )
