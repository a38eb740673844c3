from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from vidtube.database import Base


class Comment(Base):
    """Comment left by a user on a video."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    video_id = Column(
        Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    video = relationship("Video", back_populates="comments")
    owner = relationship("User")
    likes = relationship("Like", back_populates="comment", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_comment_video_created", "video_id", "created_at"),)
