"""Access token minting and verification."""

from datetime import datetime, timedelta
from typing import Dict, Any

from jose import JWTError, jwt

from vidtube.config import settings
from vidtube.exceptions import AuthenticationError
from vidtube.models.user import User


class AuthService:
    """Service for handling access tokens issued to users."""

    @staticmethod
    def create_access_token(data: Dict[str, Any]) -> str:
        """
        Create a JWT access token.

        Args:
            data: Data to encode in the token

        Returns:
            Encoded JWT token
        """
        to_encode = data.copy()
        expire = datetime.utcnow() + timedelta(
            minutes=settings.access_token_expire_minutes
        )
        to_encode.update({"exp": expire, "type": "access"})

        encoded_jwt = jwt.encode(
            to_encode, settings.secret_key, algorithm=settings.algorithm
        )
        return encoded_jwt

    @staticmethod
    def create_token_for_user(user: User) -> str:
        """Create an access token whose subject is the user's id."""
        return AuthService.create_access_token({"sub": str(user.id)})

    @staticmethod
    def decode_access_token(token: str) -> int:
        """
        Verify an access token.

        Returns:
            The user id carried in the token

        Raises:
            AuthenticationError: invalid, expired or non-access token
        """
        try:
            payload = jwt.decode(
                token, settings.secret_key, algorithms=[settings.algorithm]
            )
        except JWTError:
            raise AuthenticationError("Could not validate credentials")

        if payload.get("type") != "access":
            raise AuthenticationError("Invalid token type")

        subject = str(payload.get("sub") or "")
        if not (subject.isascii() and subject.isdecimal()):
            raise AuthenticationError("Invalid token subject")
        return int(subject)
