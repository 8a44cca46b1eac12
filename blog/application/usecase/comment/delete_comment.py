"""Delete comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentService, OwnershipGuard
from blog.domain.value import CommentId, UserId

from .common import PositiveId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: PositiveId
    user_id: PositiveId  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment (and its replies)."""

    def __init__(
        self,
        ownership_guard: OwnershipGuard,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            ownership_guard: Author check for comment mutations
            comment_service: Comment store
        """
        self.ownership_guard = ownership_guard
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Deleting the same comment twice fails the second time with
        NotFoundError.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user doesn't own the comment
        """
        comment_id = CommentId(request.comment_id)

        await self.ownership_guard.require_owner(comment_id, UserId(request.user_id))
        await self.comment_service.delete(comment_id)

        return DeleteCommentResponse(comment_id=comment_id, deleted=True)
