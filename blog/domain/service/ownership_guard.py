"""Authorization guard for comment mutations."""

import logfire

from blog.domain.error import ForbiddenError, NotFoundError
from blog.domain.model import Comment
from blog.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService


class OwnershipGuard(Service):
    """Only the author of a comment may update or delete it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def require_owner(self, comment_id: CommentId, requester_id: UserId) -> Comment:
        """Load a comment and check the requester wrote it.

        Existence is checked before ownership, so a missing comment is a
        NotFoundError for everyone.

        Args:
            comment_id: Comment to be modified
            requester_id: Authenticated user asking for the change

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", str(comment_id))

        if comment.author_id != requester_id:
            logfire.warn(
                "Comment modification by non-author rejected",
                comment_id=comment_id,
                author_id=comment.author_id,
                requester_id=requester_id,
            )
            raise ForbiddenError("comment", str(comment_id), str(requester_id))

        return comment
