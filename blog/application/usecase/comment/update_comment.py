"""Update comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentService, OwnershipGuard
from blog.domain.value import CommentId, UserId

from .common import CommentContent, CommentItem, PositiveId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: PositiveId
    user_id: PositiveId  # Current user ID (must be author)
    content: CommentContent  # New content (required, cannot be empty)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        ownership_guard: OwnershipGuard,
        comment_service: CommentService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            ownership_guard: Author check for comment mutations
            comment_service: Comment store
        """
        self.ownership_guard = ownership_guard
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Comment ID, requesting user and new content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user doesn't own the comment
        """
        comment_id = CommentId(request.comment_id)

        await self.ownership_guard.require_owner(comment_id, UserId(request.user_id))
        updated = await self.comment_service.update_content(comment_id, request.content)

        return CommentItem.from_comment(updated)
