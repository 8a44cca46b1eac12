"""Comment domain service (the comment store)."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model import Comment, CommentDraft
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId

from .base import Service


class CommentService(Service):
    """Domain service for comment persistence operations.

    Authorization-agnostic: ownership is checked by OwnershipGuard before
    update or delete is called.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create(self, draft: CommentDraft) -> Comment:
        """Persist a validated comment.

        Only call with a draft returned by ThreadValidator.

        Args:
            draft: Validated comment

        Returns:
            Created comment (id, timestamps and likes set by storage)
        """
        with logfire.span(
            "comment_service.create",
            post_id=draft.post_id,
            author_id=draft.author_id,
            parent_comment_id=draft.parent_comment_id,
        ):
            comment = await self.comment_repository.create(draft)
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=comment.post_id,
                is_reply=comment.is_reply,
            )
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment with a fresh updated_at

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=comment_id,
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=comment_id)
                raise NotFoundError("comment", str(comment_id))

            logfire.info("Comment content updated", comment_id=comment_id)
            return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, for a top-level comment, its replies.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment doesn't exist (e.g. already deleted)
        """
        with logfire.span("comment_service.delete", comment_id=comment_id):
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise NotFoundError("comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=comment_id)

    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment comment likes.

        Args:
            comment_id: Comment ID
        """
        with logfire.span("comment_service.increment_likes", comment_id=comment_id):
            await self.comment_repository.increment_likes(comment_id)
            logfire.info("Comment likes incremented", comment_id=comment_id)

    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement comment likes (minimum 0).

        Args:
            comment_id: Comment ID
        """
        with logfire.span("comment_service.decrement_likes", comment_id=comment_id):
            await self.comment_repository.decrement_likes(comment_id)
            logfire.info("Comment likes decremented", comment_id=comment_id)
