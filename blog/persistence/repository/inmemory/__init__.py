"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .thread import InMemoryThreadLookupRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryThreadLookupRepository",
]
