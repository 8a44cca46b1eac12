"""Thread lookup repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.model.thread import ParentThread
from blog.domain.value import CommentId, PostId, UserId


class ThreadLookupRepository(ABC):
    """Read-only lookups the thread validator runs before a write.

    The lookups are independent of each other and may be awaited
    concurrently, so implementations must not share a single connection
    between calls.
    """

    @abstractmethod
    async def find_published_post(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID if it is published.

        Returns:
            The post, or None if missing or unpublished
        """
        pass

    @abstractmethod
    async def find_parent_thread(
        self, comment_id: CommentId
    ) -> Optional[ParentThread]:
        """Load a would-be parent comment and its post's published flag.

        Returns:
            The parent thread, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def reply_author_exists(
        self, parent_comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Check whether a user has already replied within a thread.

        Args:
            parent_comment_id: Top-level comment of the thread
            author_id: User to look for among the reply authors

        Returns:
            True if a reply to parent_comment_id by author_id exists
        """
        pass
