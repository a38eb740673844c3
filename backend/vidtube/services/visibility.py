"""Which videos a viewer may see: published ones, plus their own private ones."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vidtube.exceptions import NotFoundError
from vidtube.models import Video
from vidtube.services.authorization import authorize


def visible_to(viewer_id: int | None):
    """Filter clause selecting the videos a viewer may see."""
    if viewer_id is None:
        return Video.is_published.is_(True)
    return or_(Video.is_published.is_(True), Video.owner_id == viewer_id)


def is_visible(video: Video, viewer_id: int | None) -> bool:
    return bool(video.is_published) or authorize(viewer_id, video.owner_id)


def get_visible_video(db: Session, video_id: int, viewer_id: int | None) -> Video:
    """
    Load a video the viewer may see.

    A private video looks exactly like a missing one to anyone but its owner.
    """
    video = db.get(Video, video_id)
    if video is None or not is_visible(video, viewer_id):
        raise NotFoundError("Video not found")
    return video
