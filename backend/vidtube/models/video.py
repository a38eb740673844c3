from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    Boolean,
    Index,
)
from sqlalchemy.orm import relationship

from vidtube.database import Base


class Video(Base):
    """Video model. Media files live in external storage and are referenced by URL."""

    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)

    # Media references issued by the file storage service
    video_file_url = Column(String(512), nullable=False)
    thumbnail_url = Column(String(512), nullable=False)

    duration_seconds = Column(Integer, default=0, nullable=False)
    views = Column(Integer, default=0, nullable=False)
    is_published = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    owner = relationship("User", back_populates="videos")
    comments = relationship(
        "Comment", back_populates="video", cascade="all, delete-orphan"
    )
    likes = relationship("Like", back_populates="video", cascade="all, delete-orphan")
    playlist_videos = relationship(
        "PlaylistVideo", back_populates="video", cascade="all, delete-orphan"
    )
    watch_history_entries = relationship(
        "WatchHistoryEntry", back_populates="video", cascade="all, delete-orphan"
    )

    # Composite indexes for feed queries
    __table_args__ = (
        Index("idx_video_owner_created", "owner_id", "created_at"),
        Index("idx_video_published_created", "is_published", "created_at"),
    )
