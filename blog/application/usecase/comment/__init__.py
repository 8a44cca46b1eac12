"""Comment use cases."""

from .common import CommentItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .list_comments import (
    CommentPageResponse,
    CountedCommentsResponse,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListCommentsWithTotalUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentPageResponse",
    "CountedCommentsResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "ListCommentsWithTotalUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
