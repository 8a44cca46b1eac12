"""In-memory thread lookup repository for testing."""

from typing import Optional

from blog.domain.model import ParentThread, Post
from blog.domain.repository.thread import ThreadLookupRepository
from blog.domain.value import CommentId, PostId, UserId

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository


class InMemoryThreadLookupRepository(ThreadLookupRepository):
    """Thread lookups over the in-memory comment and post repositories."""

    def __init__(
        self,
        comment_repository: InMemoryCommentRepository,
        post_repository: InMemoryPostRepository,
    ) -> None:
        self._comments = comment_repository
        self._posts = post_repository

    async def find_published_post(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID if it is published."""
        post = await self._posts.find_by_id(post_id)
        if post is None or not post.published:
            return None
        return post

    async def find_parent_thread(
        self, comment_id: CommentId
    ) -> Optional[ParentThread]:
        """Load a comment together with its post's published flag."""
        comment = await self._comments.find_by_id(comment_id)
        if comment is None:
            return None

        post = await self._posts.find_by_id(comment.post_id)
        return ParentThread(
            comment=comment, post_published=post is not None and post.published
        )

    async def reply_author_exists(
        self, parent_comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Check for a reply in the thread written by author_id."""
        return any(
            c.parent_comment_id == parent_comment_id and c.author_id == author_id
            for c in self._comments.comments()
        )
