"""blog_schema

Create the schema for the blog comment subsystem:
- Users (identity and role only)
- Posts (published flag gates comment visibility)
- Comments (two-level threads stored as flat rows)

Revision ID: 3c1d9f2a7b40
Revises:
Create Date: 2026-10-19 09:12:44.512093

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9f2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("username", sa.String(16), nullable=False),
        sa.Column("role", sa.String(10), nullable=False, server_default="USER"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("role IN ('USER', 'ADMIN')", name="valid_user_role"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("published", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # Ids are always generated so they stay monotonic; they double as cursors.
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), sa.Identity(always=True), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("parent_comment_id", sa.Integer(), nullable=True),
        sa.Column("target_user_id", sa.Integer(), nullable=True),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["target_user_id"], ["users.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(parent_comment_id IS NULL) = (target_user_id IS NULL)",
            name="reply_target_pairing",
        ),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
        sa.CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
    )
    op.create_index(
        "idx_comments_post_top_level",
        "comments",
        ["post_id", "id"],
        postgresql_where=sa.text("parent_comment_id IS NULL"),
    )
    op.create_index(
        "idx_comments_parent_id", "comments", ["parent_comment_id", "id"]
    )
    op.create_index(
        "idx_comments_parent_author", "comments", ["parent_comment_id", "author_id"]
    )
    op.create_index(
        "idx_comments_post_likes", "comments", ["post_id", "likes", "id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_post_likes", table_name="comments")
    op.drop_index("idx_comments_parent_author", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_post_top_level", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_table("posts")

    op.drop_table("users")
