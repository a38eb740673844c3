from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship, validates

from vidtube.database import Base


class User(Base):
    """User model. Every user doubles as a channel others can subscribe to."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    display_name = Column(String(255), nullable=False)
    avatar_url = Column(String(512), nullable=True)
    cover_image_url = Column(String(512), nullable=True)

    # Credentials (never exposed in responses)
    password_hash = Column(String(255), nullable=False)
    refresh_token = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    videos = relationship("Video", back_populates="owner", cascade="all, delete-orphan")
    playlists = relationship(
        "Playlist", back_populates="owner", cascade="all, delete-orphan"
    )
    watch_history_entries = relationship(
        "WatchHistoryEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="WatchHistoryEntry.id",
    )

    @validates("username")
    def normalize_username(self, key, value):
        return value.strip().lower() if value else value

    @validates("email")
    def normalize_email(self, key, value):
        return value.strip().lower() if value else value
