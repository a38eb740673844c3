"""
Shared pytest fixtures for the API test suite.

Provides reusable fixtures for:
- An in-memory SQLite database, recreated per test
- A FastAPI TestClient bound to the same database
- User/video/comment factories and bearer-token headers
- An in-memory stand-in for the Redis cache
"""

import os

# Must be set before vidtube.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from vidtube.database import Base, SessionLocal, engine
from vidtube.main import app
from vidtube.models import Comment, User, Video
from vidtube.services.auth_service import AuthService
from vidtube.services.cache import CacheService


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def db():
    """Fresh schema and a session for direct service calls."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """TestClient sharing the in-memory database with the db fixture."""
    return TestClient(app)


# =============================================================================
# Cache Fixtures
# =============================================================================

class InMemoryRedis:
    """Dict-backed stand-in exposing the RedisClient methods the cache uses."""

    def __init__(self):
        self.store = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, expire=None):
        self.store[key] = value
        return True

    def delete(self, *keys):
        removed = [k for k in keys if self.store.pop(k, None) is not None]
        return bool(removed)


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def cache(fake_redis):
    return CacheService(redis_client=fake_redis)


# =============================================================================
# Factories
# =============================================================================

@pytest.fixture
def make_user(db):
    """Create and commit a user."""

    def _make_user(username: str, **overrides) -> User:
        user = User(
            username=username,
            email=overrides.pop("email", f"{username.lower()}@example.com"),
            display_name=overrides.pop("display_name", username.title()),
            avatar_url=overrides.pop(
                "avatar_url", f"https://cdn.example.com/avatars/{username.lower()}.png"
            ),
            password_hash=overrides.pop("password_hash", "$2b$12$not-a-real-hash"),
            **overrides,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_video(db):
    """Create and commit a video owned by the given user."""

    def _make_video(owner: User, title: str = "Untitled", **overrides) -> Video:
        video = Video(
            owner_id=owner.id,
            title=title,
            description=overrides.pop("description", f"About {title}"),
            video_file_url=overrides.pop(
                "video_file_url", "https://cdn.example.com/videos/file.mp4"
            ),
            thumbnail_url=overrides.pop(
                "thumbnail_url", "https://cdn.example.com/thumbs/file.jpg"
            ),
            duration_seconds=overrides.pop("duration_seconds", 120),
            **overrides,
        )
        db.add(video)
        db.commit()
        db.refresh(video)
        return video

    return _make_video


@pytest.fixture
def make_comment(db):
    """Create and commit a comment."""

    def _make_comment(owner: User, video: Video, content: str = "Nice!") -> Comment:
        comment = Comment(owner_id=owner.id, video_id=video.id, content=content)
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment

    return _make_comment


@pytest.fixture
def alice(make_user):
    return make_user("alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob")


@pytest.fixture
def auth_headers():
    """Bearer headers for a user."""

    def _auth_headers(user: User) -> dict:
        return {"Authorization": f"Bearer {AuthService.create_token_for_user(user)}"}

    return _auth_headers
