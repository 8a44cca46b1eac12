"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from blog.domain.model import Comment, Post
from blog.domain.value import CommentId, PostId, UserId


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        content=row.get("content") or "",
        published=row["published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Extra keys (joined or computed columns) are ignored.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_comment_id = row.get("parent_comment_id")
    target_user_id = row.get("target_user_id")
    return Comment(
        id=CommentId(row["id"]),
        author_id=UserId(row["author_id"]),
        post_id=PostId(row["post_id"]),
        content=row["content"],
        parent_comment_id=CommentId(parent_comment_id)
        if parent_comment_id is not None
        else None,
        target_user_id=UserId(target_user_id) if target_user_id is not None else None,
        likes=row["likes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
