from pydantic import BaseModel


class LikeStatus(BaseModel):
    """Result of a like toggle."""

    liked: bool


class SubscriptionStatus(BaseModel):
    """Result of a subscription toggle."""

    subscribed: bool
