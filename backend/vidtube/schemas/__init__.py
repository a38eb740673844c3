from vidtube.schemas.common import ApiResponse, ErrorResponse, PageMeta
from vidtube.schemas.user import (
    OwnerSummary,
    CommentOwner,
    UserResponse,
    UserUpdate,
    ChannelProfile,
    WatchHistoryIds,
)
from vidtube.schemas.video import (
    VideoBase,
    VideoCreate,
    VideoResponse,
    VideoWithOwner,
    VideoUpdate,
    VideoFilter,
    VideoSort,
    PaginatedVideosResponse,
    PublishStatus,
)
from vidtube.schemas.comment import (
    CommentContent,
    CommentResponse,
    CommentWithOwner,
    PaginatedCommentsResponse,
)
from vidtube.schemas.engagement import LikeStatus, SubscriptionStatus
from vidtube.schemas.playlist import (
    PlaylistCreate,
    PlaylistResponse,
    PlaylistWithVideos,
    PlaylistUpdate,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "PageMeta",
    "OwnerSummary",
    "CommentOwner",
    "UserResponse",
    "UserUpdate",
    "ChannelProfile",
    "WatchHistoryIds",
    "VideoBase",
    "VideoCreate",
    "VideoResponse",
    "VideoWithOwner",
    "VideoUpdate",
    "VideoFilter",
    "VideoSort",
    "PaginatedVideosResponse",
    "PublishStatus",
    "CommentContent",
    "CommentResponse",
    "CommentWithOwner",
    "PaginatedCommentsResponse",
    "LikeStatus",
    "SubscriptionStatus",
    "PlaylistCreate",
    "PlaylistResponse",
    "PlaylistWithVideos",
    "PlaylistUpdate",
]
