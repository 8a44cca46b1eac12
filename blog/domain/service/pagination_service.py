"""Pagination engine for comment listings."""

from typing import Optional

import logfire

from blog.config import CommentSettings
from blog.domain.error import NotFoundError, StructuralError, ThreadViolation
from blog.domain.model import CommentPage, CountedComments
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentId, CommentScope, CommentSort

from .base import Service


class PaginationService(Service):
    """Cursor (keyset) pagination over the two listing scopes.

    A window is read as limit + 1 rows after the cursor; the extra row only
    signals that more results exist and is never returned. Cursors are
    always ids handed out by a previous window, so iterating with
    next_cursor stays correct while comments are inserted or deleted.
    Comments inserted ahead of the first window only show up on a fresh,
    cursor-less listing.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> None:
        """Initialize pagination service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            settings: Page size defaults and ceiling
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.settings = settings

    def clamp_limit(self, limit: Optional[int]) -> int:
        """Apply the default page size and clamp to [1, max_page_size]."""
        if limit is None:
            limit = self.settings.default_page_size
        return max(1, min(limit, self.settings.max_page_size))

    async def list_comments(
        self,
        scope: CommentScope,
        sort: CommentSort | None = None,
        cursor: Optional[CommentId] = None,
        limit: Optional[int] = None,
    ) -> CommentPage:
        """List one window of a scope.

        Args:
            scope: Top-level comments of a post or replies of a comment
            sort: Sort order (defaults to newest first)
            cursor: next_cursor of the previous window, None for the first
            limit: Requested page size (clamped)

        Returns:
            Page with items, next_cursor and has_more

        Raises:
            NotFoundError: If the post/parent is missing or the post unpublished
            StructuralError: If the parent comment is itself a reply
        """
        sort = sort or CommentSort()
        limit = self.clamp_limit(limit)

        with logfire.span(
            "pagination_service.list_comments",
            post_id=scope.post_id,
            parent_comment_id=scope.parent_comment_id,
            sort_by=sort.by.value,
            sort_order=sort.order.value,
            cursor=cursor,
            limit=limit,
        ):
            await self._ensure_reachable(scope)

            rows = await self.comment_repository.find_window(
                scope=scope, sort=sort, cursor=cursor, limit=limit + 1
            )

            has_more = len(rows) > limit
            if has_more:
                rows = rows[:limit]
            next_cursor = rows[-1].id if has_more else None

            logfire.info(
                "Comment window listed",
                count=len(rows),
                has_more=has_more,
                next_cursor=next_cursor,
            )
            return CommentPage(items=rows, next_cursor=next_cursor, has_more=has_more)

    async def list_comments_with_total(
        self,
        scope: CommentScope,
        sort: CommentSort | None = None,
        cursor: Optional[CommentId] = None,
        limit: Optional[int] = None,
    ) -> CountedComments:
        """List one window of a scope together with the scope's total count.

        The window and the count are read atomically, so the total matches
        the rows it is reported with.

        Raises:
            NotFoundError: If the post/parent is missing or the post unpublished
            StructuralError: If the parent comment is itself a reply
        """
        sort = sort or CommentSort()
        limit = self.clamp_limit(limit)

        with logfire.span(
            "pagination_service.list_comments_with_total",
            post_id=scope.post_id,
            parent_comment_id=scope.parent_comment_id,
            cursor=cursor,
            limit=limit,
        ):
            await self._ensure_reachable(scope)

            rows, total = await self.comment_repository.find_window_with_total(
                scope=scope, sort=sort, cursor=cursor, limit=limit
            )
            logfire.info("Comment window counted", count=len(rows), total=total)
            return CountedComments(comments=rows, total_comments=total)

    async def _ensure_reachable(self, scope: CommentScope) -> None:
        """Reject scopes hanging off a missing or unpublished post."""
        post_id = scope.post_id
        if not scope.is_top_level:
            parent = await self.comment_repository.find_by_id(scope.parent_comment_id)
            if parent is None:
                raise NotFoundError("parent-comment", str(scope.parent_comment_id))
            if parent.is_reply:
                raise StructuralError(
                    ThreadViolation.DEPTH_EXCEEDED,
                    f"comment {parent.id} is a reply and has no replies of its own",
                )
            post_id = parent.post_id

        post = await self.post_repository.find_by_id(post_id)
        if post is None or not post.published:
            logfire.warn("Listing on missing or unpublished post", post_id=post_id)
            raise NotFoundError("post", str(post_id))
