"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import (
    Select,
    and_,
    asc,
    delete,
    desc,
    func,
    insert,
    select,
    tuple_,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import NotFoundError
from blog.domain.model import Comment, CommentDraft
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, CommentScope, CommentSort, SortField
from blog.persistence.mappers import row_to_comment
from blog.persistence.tables import comments_table


def scope_clause(scope: CommentScope):
    """WHERE clause selecting the rows of a listing scope."""
    if scope.is_top_level:
        return and_(
            comments_table.c.post_id == scope.post_id,
            comments_table.c.parent_comment_id.is_(None),
        )
    return comments_table.c.parent_comment_id == scope.parent_comment_id


def sort_columns(sort: CommentSort) -> list:
    """Keyset columns for a sort, most significant first."""
    if sort.by == SortField.LIKES:
        return [comments_table.c.likes, comments_table.c.id]
    return [comments_table.c.id]


def window_statement(
    scope: CommentScope,
    sort: CommentSort,
    cursor_key: Optional[tuple[int, ...]],
    limit: int,
) -> Select:
    """Build the keyset window query for a scope.

    Args:
        scope: Listing scope
        sort: Sort field and direction
        cursor_key: Sort key of the cursor row, None for the first window
        limit: Maximum number of rows

    Returns:
        SELECT statement over comments_table
    """
    columns = sort_columns(sort)
    stmt = select(comments_table).where(scope_clause(scope))

    if cursor_key is not None:
        position = tuple_(*columns) if len(columns) > 1 else columns[0]
        bound = tuple_(*cursor_key) if len(columns) > 1 else cursor_key[0]
        stmt = stmt.where(position < bound if sort.descending else position > bound)

    direction = desc if sort.descending else asc
    return stmt.order_by(*(direction(column) for column in columns)).limit(limit)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(self, draft: CommentDraft) -> Comment:
        """Insert a comment; id, likes and timestamps come from the database."""
        stmt = (
            insert(comments_table)
            .values(**draft.model_dump())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        return row_to_comment(result.one()._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=func.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete); replies go with it via ON DELETE CASCADE."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def find_window(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> List[Comment]:
        """Fetch a keyset window of a scope."""
        cursor_key = await self._cursor_key(sort, cursor)
        stmt = window_statement(scope, sort, cursor_key, limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_window_with_total(
        self,
        scope: CommentScope,
        sort: CommentSort,
        cursor: Optional[CommentId],
        limit: int,
    ) -> tuple[List[Comment], int]:
        """Fetch a window and the scope count in a single statement.

        The count rides along as a scalar subquery so both come from the
        same snapshot. An empty window falls back to the count alone,
        which is a single statement as well.
        """
        cursor_key = await self._cursor_key(sort, cursor)
        count_stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(scope_clause(scope))
        )
        stmt = window_statement(scope, sort, cursor_key, limit).add_columns(
            count_stmt.scalar_subquery().label("total_in_scope")
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        if not rows:
            total = (await self.session.execute(count_stmt)).scalar() or 0
            return [], total
        return [row_to_comment(row) for row in rows], rows[0]["total_in_scope"]

    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment likes by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=comments_table.c.likes + 1)
        )
        await self.session.execute(stmt)

    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement likes by 1 (minimum 0)."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.likes > 0)
            .values(likes=comments_table.c.likes - 1)
        )
        await self.session.execute(stmt)

    async def _cursor_key(
        self, sort: CommentSort, cursor: Optional[CommentId]
    ) -> Optional[tuple[int, ...]]:
        """Resolve the keyset position of a cursor.

        Created order is keyed on the id alone, so the cursor row doesn't
        have to exist anymore. Likes order needs the row's likes.
        """
        if cursor is None:
            return None
        if sort.by != SortField.LIKES:
            return sort.key(cursor, 0)

        stmt = select(comments_table.c.likes).where(comments_table.c.id == cursor)
        likes = (await self.session.execute(stmt)).scalar()
        if likes is None:
            raise NotFoundError("cursor", str(cursor))
        return sort.key(cursor, likes)
