"""Unit tests for CommentService."""

import pytest

from blog.domain.error import NotFoundError
from blog.domain.model import CommentDraft
from blog.domain.repository import CommentRepository
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId
from tests.conftest import add_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_likes_and_timestamps(self, unit_env):
        """Storage assigns the id, zero likes and matching timestamps."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        draft = CommentDraft(
            author_id=UserId(10), post_id=PostId(1), content="Nice post"
        )

        # Act
        result = await comment_service.create(draft)

        # Assert
        assert result.id > 0
        assert result.likes == 0
        assert result.content == "Nice post"
        assert result.created_at == result.updated_at

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_ids_increase(self, unit_env):
        """Each new comment gets a larger id than the previous one."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        draft = CommentDraft(author_id=UserId(10), post_id=PostId(1), content="x")

        # Act
        first = await comment_service.create(draft)
        second = await comment_service.create(draft)

        # Assert
        assert second.id > first.id


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_update_replaces_content(self, unit_env):
        """Updating replaces content and bumps updated_at."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await add_comment(comment_repo, post_id=1, author_id=10)

        # Act
        updated = await comment_service.update_content(comment.id, "Edited")

        # Assert
        assert updated.content == "Edited"
        assert updated.updated_at >= comment.updated_at
        assert updated.created_at == comment.created_at

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        """Updating a comment that doesn't exist fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.update_content(CommentId(404), "Edited")
        assert exc_info.value.resource == "comment"


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, unit_env):
        """The second delete of the same comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await add_comment(comment_repo, post_id=1, author_id=10)

        # Act
        await comment_service.delete(comment.id)

        # Assert
        assert await comment_service.get_comment_by_id(comment.id) is None
        with pytest.raises(NotFoundError):
            await comment_service.delete(comment.id)

    @pytest.mark.asyncio
    async def test_delete_top_level_removes_replies(self, unit_env):
        """Deleting a top-level comment removes its whole thread."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await add_comment(comment_repo, post_id=1, author_id=10)
        reply = await add_comment(
            comment_repo,
            post_id=1,
            author_id=20,
            parent_comment_id=parent.id,
            target_user_id=10,
        )
        other = await add_comment(comment_repo, post_id=1, author_id=30)

        # Act
        await comment_service.delete(parent.id)

        # Assert
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(other.id) is not None

    @pytest.mark.asyncio
    async def test_deleted_ids_are_not_reused(self, unit_env):
        """A comment created after a delete never gets the deleted id."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await add_comment(comment_repo, post_id=1, author_id=10)
        await comment_service.delete(comment.id)

        # Act
        newer = await add_comment(comment_repo, post_id=1, author_id=10)

        # Assert
        assert newer.id > comment.id


class TestLikes:
    """Tests for increment_likes / decrement_likes."""

    @pytest.mark.asyncio
    async def test_increment_and_decrement_likes(self, unit_env):
        """Likes go up and down by one."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await add_comment(comment_repo, post_id=1, author_id=10)

        # Act
        await comment_service.increment_likes(comment.id)
        await comment_service.increment_likes(comment.id)
        await comment_service.decrement_likes(comment.id)

        # Assert
        saved = await comment_repo.find_by_id(comment.id)
        assert saved.likes == 1

    @pytest.mark.asyncio
    async def test_decrement_likes_floors_at_zero(self, unit_env):
        """Likes never go negative."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await add_comment(comment_repo, post_id=1, author_id=10)

        # Act
        await comment_service.decrement_likes(comment.id)

        # Assert
        saved = await comment_repo.find_by_id(comment.id)
        assert saved.likes == 0
