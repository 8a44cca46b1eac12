"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.thread import PostgresThreadLookupRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresThreadLookupRepository",
]
