"""initial schema

Revision ID: 3f9c1d2a7b44
Revises:
Create Date: 2026-10-19 10:12:41.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1d2a7b44'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create every table with its uniqueness and check constraints."""

    # ── users ──────────────────────────────────────────────────────────
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(512), nullable=True),
        sa.Column('cover_image_url', sa.String(512), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('refresh_token', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # ── videos ─────────────────────────────────────────────────────────
    op.create_table(
        'videos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('video_file_url', sa.String(512), nullable=False),
        sa.Column('thumbnail_url', sa.String(512), nullable=False),
        sa.Column('duration_seconds', sa.Integer(), nullable=False),
        sa.Column('views', sa.Integer(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_videos_id', 'videos', ['id'])
    op.create_index('ix_videos_owner_id', 'videos', ['owner_id'])
    op.create_index('idx_video_owner_created', 'videos', ['owner_id', 'created_at'])
    op.create_index('idx_video_published_created', 'videos',
                    ['is_published', 'created_at'])

    # ── comments ───────────────────────────────────────────────────────
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('video_id', sa.Integer(),
                  sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('owner_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_comments_id', 'comments', ['id'])
    op.create_index('ix_comments_video_id', 'comments', ['video_id'])
    op.create_index('ix_comments_owner_id', 'comments', ['owner_id'])
    op.create_index('idx_comment_video_created', 'comments',
                    ['video_id', 'created_at'])

    # ── likes ──────────────────────────────────────────────────────────
    op.create_table(
        'likes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('video_id', sa.Integer(),
                  sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=True),
        sa.Column('comment_id', sa.Integer(),
                  sa.ForeignKey('comments.id', ondelete='CASCADE'), nullable=True),
        sa.Column('liked_by_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('liked_by_id', 'video_id', name='uq_like_user_video'),
        sa.UniqueConstraint('liked_by_id', 'comment_id',
                            name='uq_like_user_comment'),
        sa.CheckConstraint('(video_id IS NULL) <> (comment_id IS NULL)',
                           name='ck_like_single_target'),
    )
    op.create_index('ix_likes_id', 'likes', ['id'])
    op.create_index('ix_likes_video_id', 'likes', ['video_id'])
    op.create_index('ix_likes_comment_id', 'likes', ['comment_id'])
    op.create_index('ix_likes_liked_by_id', 'likes', ['liked_by_id'])

    # ── subscriptions ──────────────────────────────────────────────────
    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('subscriber_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('channel_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('subscriber_id', 'channel_id',
                            name='uq_subscription_subscriber_channel'),
        sa.CheckConstraint('subscriber_id <> channel_id',
                           name='ck_subscription_no_self'),
    )
    op.create_index('ix_subscriptions_id', 'subscriptions', ['id'])
    op.create_index('ix_subscriptions_subscriber_id', 'subscriptions',
                    ['subscriber_id'])
    op.create_index('ix_subscriptions_channel_id', 'subscriptions', ['channel_id'])

    # ── playlists ──────────────────────────────────────────────────────
    op.create_table(
        'playlists',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_playlists_id', 'playlists', ['id'])
    op.create_index('ix_playlists_owner_id', 'playlists', ['owner_id'])

    op.create_table(
        'playlist_videos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('playlist_id', sa.Integer(),
                  sa.ForeignKey('playlists.id', ondelete='CASCADE'), nullable=False),
        sa.Column('video_id', sa.Integer(),
                  sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('added_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_playlist_videos_id', 'playlist_videos', ['id'])
    op.create_index('ix_playlist_videos_playlist_id', 'playlist_videos',
                    ['playlist_id'])
    op.create_index('ix_playlist_videos_video_id', 'playlist_videos', ['video_id'])
    op.create_index('idx_playlist_video', 'playlist_videos',
                    ['playlist_id', 'video_id'], unique=True)
    op.create_index('idx_playlist_position', 'playlist_videos',
                    ['playlist_id', 'position'])

    # ── watch_history ──────────────────────────────────────────────────
    op.create_table(
        'watch_history',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('video_id', sa.Integer(),
                  sa.ForeignKey('videos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('watched_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'video_id',
                            name='uq_watch_history_user_video'),
    )
    op.create_index('ix_watch_history_id', 'watch_history', ['id'])
    op.create_index('ix_watch_history_user_id', 'watch_history', ['user_id'])
    op.create_index('ix_watch_history_video_id', 'watch_history', ['video_id'])


def downgrade() -> None:
    """Drop every table."""
    op.drop_table('watch_history')
    op.drop_table('playlist_videos')
    op.drop_table('playlists')
    op.drop_table('subscriptions')
    op.drop_table('likes')
    op.drop_table('comments')
    op.drop_table('videos')
    op.drop_table('users')
