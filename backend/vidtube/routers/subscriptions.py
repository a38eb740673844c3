"""Subscriptions router for the subscriber -> channel graph."""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.dependencies import get_current_user
from vidtube.models.user import User
from vidtube.schemas.common import ApiResponse
from vidtube.schemas.engagement import SubscriptionStatus
from vidtube.schemas.user import OwnerSummary
from vidtube.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/subscriptions")


@router.post("/c/{channel_id}", response_model=ApiResponse[SubscriptionStatus])
async def toggle_subscription(
    channel_id: str,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Subscribe to a channel, or unsubscribe if already subscribed."""
    result = SubscriptionService(db).toggle_subscription(current_user.id, channel_id)
    if result.subscribed:
        response.status_code = status.HTTP_201_CREATED
        return ApiResponse(
            status_code=status.HTTP_201_CREATED,
            data=result,
            message="Subscribed successfully",
        )
    return ApiResponse(data=result, message="Unsubscribed successfully")


@router.get(
    "/c/{channel_id}/subscribers", response_model=ApiResponse[List[OwnerSummary]]
)
async def get_channel_subscribers(
    channel_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the users subscribed to a channel."""
    subscribers = SubscriptionService(db).get_subscriber_list(channel_id)
    return ApiResponse(
        data=subscribers, message="Subscribers list fetched successfully"
    )


@router.get("/u/{subscriber_id}", response_model=ApiResponse[List[OwnerSummary]])
async def get_subscribed_channels(
    subscriber_id: str,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the channels a user is subscribed to."""
    channels = SubscriptionService(db).get_subscribed_channels(subscriber_id)
    return ApiResponse(data=channels, message="Channels list fetched successfully")
