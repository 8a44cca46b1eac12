"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .ownership_guard import OwnershipGuard
from .pagination_service import PaginationService
from .thread_validator import ThreadValidator

__all__ = [
    "CommentService",
    "OwnershipGuard",
    "PaginationService",
    "Service",
    "ThreadValidator",
]
