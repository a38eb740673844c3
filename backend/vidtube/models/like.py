from datetime import datetime
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from vidtube.database import Base


class Like(Base):
    """
    A user's like on exactly one target, a video or a comment.

    The row's existence is the whole state: toggling inserts or deletes it.
    """

    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    video_id = Column(
        Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=True, index=True
    )
    comment_id = Column(
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    liked_by_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    video = relationship("Video", back_populates="likes")
    comment = relationship("Comment", back_populates="likes")
    liked_by = relationship("User")

    __table_args__ = (
        UniqueConstraint("liked_by_id", "video_id", name="uq_like_user_video"),
        UniqueConstraint("liked_by_id", "comment_id", name="uq_like_user_comment"),
        CheckConstraint(
            "(video_id IS NULL) <> (comment_id IS NULL)", name="ck_like_single_target"
        ),
    )
