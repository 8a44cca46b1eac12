"""Repository interfaces for the blog comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.thread import ThreadLookupRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "ThreadLookupRepository",
]
