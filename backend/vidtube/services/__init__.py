from vidtube.services.auth_service import AuthService
from vidtube.services.cache import CacheService
from vidtube.services.channel_service import ChannelService
from vidtube.services.comment_service import CommentService
from vidtube.services.like_service import LikeService
from vidtube.services.playlist_service import PlaylistService
from vidtube.services.subscription_service import SubscriptionService
from vidtube.services.video_service import VideoService

__all__ = [
    "AuthService",
    "CacheService",
    "ChannelService",
    "CommentService",
    "LikeService",
    "PlaylistService",
    "SubscriptionService",
    "VideoService",
]
