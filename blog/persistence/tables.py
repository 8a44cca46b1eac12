"""SQLAlchemy table definitions for the blog comment subsystem.

These table definitions are used with SQLAlchemy Core statements.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

from blog.domain.value import Role

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity only - credentials are handled elsewhere)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("username", String(16), nullable=False, unique=True),
    Column("role", String(10), nullable=False, server_default=Role.USER.value),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "role IN ({})".format(", ".join(f"'{role.value}'" for role in Role)),
        name="valid_user_role",
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (two-level threads as flat rows)
# ============================================================================
# Identity(always=True) keeps ids monotonic and never reused; they are the
# pagination cursors. Deleting a top-level comment cascades to its replies.
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, Identity(always=True), primary_key=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "target_user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", String(500), nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(parent_comment_id IS NULL) = (target_user_id IS NULL)",
        name="reply_target_pairing",
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
)

Index(
    "idx_comments_post_top_level",
    comments_table.c.post_id,
    comments_table.c.id,
    postgresql_where=comments_table.c.parent_comment_id.is_(None),
)
Index(
    "idx_comments_parent_id", comments_table.c.parent_comment_id, comments_table.c.id
)
Index(
    "idx_comments_parent_author",
    comments_table.c.parent_comment_id,
    comments_table.c.author_id,
)
Index(
    "idx_comments_post_likes",
    comments_table.c.post_id,
    comments_table.c.likes,
    comments_table.c.id,
)
