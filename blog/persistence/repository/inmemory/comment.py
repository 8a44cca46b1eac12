"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.error import NotFoundError
from blog.domain.model.comment import Comment, CommentDraft
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, CommentScope, CommentSort, SortField


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Ids come from a counter that only moves forward, so deleted ids are
    never handed out again.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._last_id = 0

    def comments(self) -> list[Comment]:
        """All stored comments in id order."""
        return sorted(self._comments.values(), key=lambda c: c.id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def create(self, draft: CommentDraft) -> Comment:
        """Store a new comment with the next id."""
        self._last_id += 1
        now = datetime.now()
        comment = Comment(
            id=CommentId(self._last_id),
            **draft.model_dump(),
            likes=0,
            created_at=now,
            updated_at=now,
        )
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Comments are immutable - store an updated copy
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and its replies."""
        comment = self._comments.pop(comment_id, None)
        if comment is None:
            return False

        replies = [
            c.id for c in self._comments.values() if c.parent_comment_id == comment_id
        ]
        for reply_id in replies:
            del self._comments[reply_id]
        return True

    async def find_window(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> list[Comment]:
        """Fetch a keyset window of a scope."""
        return self._window(scope, sort, cursor)[:limit]

    async def find_window_with_total(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> tuple[list[Comment], int]:
        """Fetch a window and the scope count."""
        total = len(self._in_scope(scope))
        return self._window(scope, sort, cursor)[:limit], total

    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment likes by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"likes": comment.likes + 1}
            )

    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement likes by 1 (minimum 0)."""
        comment = self._comments.get(comment_id)
        if comment and comment.likes > 0:
            self._comments[comment_id] = comment.model_copy(
                update={"likes": comment.likes - 1}
            )

    def _in_scope(self, scope: CommentScope) -> list[Comment]:
        if scope.is_top_level:
            return [
                c
                for c in self._comments.values()
                if c.post_id == scope.post_id and c.parent_comment_id is None
            ]
        return [
            c
            for c in self._comments.values()
            if c.parent_comment_id == scope.parent_comment_id
        ]

    def _window(
        self, scope: CommentScope, sort: CommentSort, cursor: Optional[CommentId]
    ) -> list[Comment]:
        comments = self._in_scope(scope)
        comments.sort(key=lambda c: sort.key(c.id, c.likes), reverse=sort.descending)

        if cursor is None:
            return comments

        # Keyset: keep rows strictly after the cursor in sort order
        if sort.by == SortField.LIKES:
            cursor_row = self._comments.get(cursor)
            if cursor_row is None:
                raise NotFoundError("cursor", str(cursor))
            cursor_key = sort.key(cursor_row.id, cursor_row.likes)
        else:
            cursor_key = sort.key(cursor, 0)

        if sort.descending:
            return [c for c in comments if sort.key(c.id, c.likes) < cursor_key]
        return [c for c in comments if sort.key(c.id, c.likes) > cursor_key]
