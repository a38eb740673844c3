"""Request dependencies resolving the authenticated actor."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vidtube.database import get_db
from vidtube.exceptions import AuthenticationError
from vidtube.logger import auth_logger
from vidtube.models.user import User
from vidtube.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def _resolve_user(db: Session, token: str) -> User:
    user_id = AuthService.decode_access_token(token)
    user = db.get(User, user_id)
    if user is None:
        auth_logger.warning(f"Token presented for unknown user {user_id}")
        raise AuthenticationError("Invalid access token")
    return user


async def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> User:
    """Authenticated user for the request. Raises 401 without a valid token."""
    if credentials is None:
        raise AuthenticationError("Unauthorized request")
    return _resolve_user(db, credentials.credentials)


async def get_optional_user(
    db: Annotated[Session, Depends(get_db)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> User | None:
    """Authenticated user if a token was sent, otherwise None."""
    if credentials is None:
        return None
    return _resolve_user(db, credentials.credentials)
