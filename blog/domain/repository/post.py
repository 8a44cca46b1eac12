"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Post authoring is handled elsewhere; the comment core only looks posts
    up. save() exists for seeding.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found (published or not), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
