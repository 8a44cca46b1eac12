"""Create comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import CommentSubmission
from blog.domain.service import CommentService, ThreadValidator
from blog.domain.value import CommentId, PostId, UserId

from .common import CommentContent, CommentItem, PositiveId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author_id: PositiveId  # User ID from authenticated user
    content: CommentContent
    post_id: PositiveId | None = None  # Omit for replies to inherit the parent's post
    parent_comment_id: PositiveId | None = None  # Top-level comment being replied to
    target_user_id: PositiveId | None = None  # Required for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying within a thread."""

    def __init__(
        self,
        thread_validator: ThreadValidator,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            thread_validator: Thread structure validator
            comment_service: Comment store
        """
        self.thread_validator = thread_validator
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Validate the thread structure and resolve the post (read-only)
        2. Persist the resolved comment

        Nothing is written if validation fails.

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            StructuralError: If the reply structure is invalid
            NotFoundError: If the post or parent comment is unreachable
            ValidationError: If neither post nor parent comment is given
        """
        submission = CommentSubmission(
            author_id=UserId(request.author_id),
            content=request.content,
            post_id=PostId(request.post_id) if request.post_id else None,
            parent_comment_id=CommentId(request.parent_comment_id)
            if request.parent_comment_id
            else None,
            target_user_id=UserId(request.target_user_id)
            if request.target_user_id
            else None,
        )

        draft = await self.thread_validator.validate_and_resolve(submission)
        comment = await self.comment_service.create(draft)

        return CommentItem.from_comment(comment)
