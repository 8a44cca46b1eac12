"""Unit tests for ListCommentsUseCase and ListCommentsWithTotalUseCase."""

import pydantic
import pytest

from blog.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsUseCase,
    ListCommentsWithTotalUseCase,
)
from blog.domain.error import NotFoundError, ValidationError
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentSort, SortField, SortOrder
from tests.conftest import add_comment, save_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_pages_through_post_comments(self, unit_env):
        """Following next_cursor visits every comment once."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=1)
        for i in range(7):
            await add_comment(comment_repo, post_id=1, author_id=10, content=f"#{i}")

        # Act
        seen = []
        cursor = None
        while True:
            page = await use_case.execute(
                ListCommentsRequest(post_id=1, cursor=cursor, limit=3)
            )
            seen.extend(item.comment_id for item in page.items)
            if not page.has_more:
                break
            cursor = page.next_cursor

        # Assert
        assert seen == sorted(seen, reverse=True)
        assert len(set(seen)) == 7

    @pytest.mark.asyncio
    async def test_lists_replies_by_likes(self, unit_env):
        """Sort tokens are accepted on the request."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=1)
        parent = await add_comment(comment_repo, post_id=1, author_id=10)
        quiet = await add_comment(
            comment_repo,
            post_id=1,
            author_id=20,
            parent_comment_id=parent.id,
            target_user_id=10,
        )
        popular = await add_comment(
            comment_repo,
            post_id=1,
            author_id=30,
            parent_comment_id=parent.id,
            target_user_id=10,
        )
        await comment_repo.increment_likes(popular.id)

        # Act
        page = await use_case.execute(
            ListCommentsRequest(parent_comment_id=parent.id, sort="-likes")
        )

        # Assert
        assert [item.comment_id for item in page.items] == [popular.id, quiet.id]
        assert page.items[0].likes == 1
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_unpublished_post_raises_not_found(self, unit_env):
        """Listing comments of an unpublished post fails."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await save_post(post_repo, post_id=1, published=False)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(post_id=1))


class TestListCommentsWithTotalUseCase:
    """Tests for ListCommentsWithTotalUseCase."""

    @pytest.mark.asyncio
    async def test_returns_window_and_total(self, unit_env):
        """The response carries the window and the scope total."""
        # Arrange
        use_case = await unit_env.get(ListCommentsWithTotalUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=1)
        for _ in range(4):
            await add_comment(comment_repo, post_id=1, author_id=10)

        # Act
        response = await use_case.execute(ListCommentsRequest(post_id=1, limit=3))

        # Assert
        assert len(response.comments) == 3
        assert response.total_comments == 4


class TestListCommentsRequest:
    """Boundary checks on the request model."""

    def test_sort_token_is_parsed(self):
        request = ListCommentsRequest(post_id=1, sort="+likes")
        assert request.sort == CommentSort(by=SortField.LIKES, order=SortOrder.ASC)

    def test_default_sort(self):
        request = ListCommentsRequest(post_id=1)
        assert request.sort == CommentSort()

    def test_unknown_sort_token_rejected(self):
        with pytest.raises(ValidationError):
            ListCommentsRequest(post_id=1, sort="-title")

    def test_scope_must_be_single(self):
        with pytest.raises(pydantic.ValidationError):
            ListCommentsRequest(post_id=1, parent_comment_id=2)
        with pytest.raises(pydantic.ValidationError):
            ListCommentsRequest()

    def test_zero_limit_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ListCommentsRequest(post_id=1, limit=0)

    def test_scope_from_request(self):
        assert ListCommentsRequest(post_id=4).scope().post_id == 4
        assert ListCommentsRequest(parent_comment_id=9).scope().parent_comment_id == 9
