"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment, CommentDraft
from blog.domain.value import CommentId, CommentScope, CommentSort


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, draft: CommentDraft) -> Comment:
        """Insert a new comment.

        Storage assigns the id, sets created_at/updated_at to now and
        likes to 0.

        Args:
            draft: Validated comment to persist

        Returns:
            The stored comment row
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment and bump updated_at.

        Args:
            comment_id: ID of the comment to update
            content: New content

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Replies of a deleted top-level comment are deleted with it.
        Remaining ids are left untouched.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def find_window(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> List[Comment]:
        """Fetch up to `limit` comments of a scope in keyset order.

        Rows come strictly after the cursor row in sort order. Without a
        cursor the window starts at the beginning of the scope.

        Args:
            scope: Top-level comments of a post or replies of a comment
            sort: Sort field and direction
            cursor: Id of the last row of the previous window
            limit: Maximum number of rows

        Returns:
            Comments in sort order

        Raises:
            NotFoundError: If sorting by likes and the cursor row is gone
        """
        pass

    @abstractmethod
    async def find_window_with_total(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> tuple[List[Comment], int]:
        """Fetch a window and the scope's total comment count in one read.

        The count covers the whole scope (not only rows after the cursor)
        and is read atomically with the window.

        Returns:
            Tuple of (comments in sort order, total comments in scope)
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment likes by 1.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement likes by 1 (minimum 0).

        Args:
            comment_id: The comment ID
        """
        pass
