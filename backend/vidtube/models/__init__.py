from vidtube.models.user import User
from vidtube.models.video import Video
from vidtube.models.comment import Comment
from vidtube.models.like import Like
from vidtube.models.subscription import Subscription
from vidtube.models.playlist import Playlist, PlaylistVideo
from vidtube.models.watch_history import WatchHistoryEntry

__all__ = [
    "User",
    "Video",
    "Comment",
    "Like",
    "Subscription",
    "Playlist",
    "PlaylistVideo",
    "WatchHistoryEntry",
]
