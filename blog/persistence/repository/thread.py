"""PostgreSQL implementation of the thread lookup repository."""

from typing import Optional

from sqlalchemy import and_, exists, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.domain.model import ParentThread, Post
from blog.domain.repository import ThreadLookupRepository
from blog.domain.value import CommentId, PostId, UserId
from blog.persistence.mappers import row_to_comment, row_to_post
from blog.persistence.tables import comments_table, posts_table


class PostgresThreadLookupRepository(ThreadLookupRepository):
    """PostgreSQL implementation of ThreadLookupRepository.

    Each lookup runs on its own short-lived session: an AsyncSession
    cannot run statements concurrently, and the validator awaits the
    lookups together.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory for per-lookup sessions
        """
        self.session_factory = session_factory

    async def find_published_post(self, post_id: PostId) -> Optional[Post]:
        """Find a published post by ID."""
        stmt = select(posts_table).where(
            posts_table.c.id == post_id, posts_table.c.published.is_(True)
        )
        async with self.session_factory() as session:
            row = (await session.execute(stmt)).fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_parent_thread(
        self, comment_id: CommentId
    ) -> Optional[ParentThread]:
        """Load a comment together with its post's published flag."""
        stmt = (
            select(comments_table, posts_table.c.published)
            .select_from(
                comments_table.outerjoin(
                    posts_table, posts_table.c.id == comments_table.c.post_id
                )
            )
            .where(comments_table.c.id == comment_id)
        )
        async with self.session_factory() as session:
            row = (await session.execute(stmt)).fetchone()
        if row is None:
            return None

        data = row._asdict()
        return ParentThread(
            comment=row_to_comment(data), post_published=bool(data["published"])
        )

    async def reply_author_exists(
        self, parent_comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Check for a reply in the thread written by author_id."""
        stmt = select(
            exists().where(
                and_(
                    comments_table.c.parent_comment_id == parent_comment_id,
                    comments_table.c.author_id == author_id,
                )
            )
        )
        async with self.session_factory() as session:
            return bool((await session.execute(stmt)).scalar())
