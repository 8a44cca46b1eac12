"""Domain value objects for the blog comment subsystem."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.query import CommentScope, CommentSort
from blog.domain.value.types import Role, SortField, SortOrder

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Role",
    "SortField",
    "SortOrder",
    # Queries
    "CommentScope",
    "CommentSort",
]
