"""Unit tests for CreateCommentUseCase."""

import pydantic
import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from blog.domain.error import NotFoundError, StructuralError, ThreadViolation
from blog.domain.repository import CommentRepository, PostRepository
from tests.conftest import add_comment, save_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Commenting on a published post stores the comment."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=1)

        request = CreateCommentRequest(author_id=10, post_id=1, content="  Great read  ")

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.post_id == 1
        assert response.author_id == 10
        assert response.content == "Great read"
        assert response.likes == 0
        assert response.parent_comment_id is None
        assert response.target_user_id is None

        saved = await comment_repo.find_by_id(response.comment_id)
        assert saved is not None
        assert saved.content == "Great read"

    @pytest.mark.asyncio
    async def test_create_reply_inherits_post(self, unit_env):
        """A reply is stored under its parent's post."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=3)
        parent = await add_comment(comment_repo, post_id=3, author_id=20)

        request = CreateCommentRequest(
            author_id=30,
            parent_comment_id=parent.id,
            target_user_id=20,
            content="Agreed",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.post_id == 3
        assert response.parent_comment_id == parent.id
        assert response.target_user_id == 20

    @pytest.mark.asyncio
    async def test_invalid_reply_is_not_stored(self, unit_env):
        """A rejected reply leaves no row behind."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await save_post(post_repo, post_id=1)
        parent = await add_comment(comment_repo, post_id=1, author_id=20)

        request = CreateCommentRequest(
            author_id=30,
            parent_comment_id=parent.id,
            target_user_id=99,
            content="Hey stranger",
        )

        # Act & Assert
        with pytest.raises(StructuralError) as exc_info:
            await use_case.execute(request)
        assert exc_info.value.violation == ThreadViolation.INVALID_TARGET
        assert comment_repo.comments() == [parent]

    @pytest.mark.asyncio
    async def test_comment_on_unpublished_post_raises_not_found(self, unit_env):
        """Unpublished posts don't accept comments."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await save_post(post_repo, post_id=1, published=False)

        request = CreateCommentRequest(author_id=10, post_id=1, content="Early bird")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(request)


class TestCreateCommentRequest:
    """Boundary checks on the request model."""

    def test_blank_content_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CreateCommentRequest(author_id=10, post_id=1, content="   ")

    def test_content_over_500_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CreateCommentRequest(author_id=10, post_id=1, content="x" * 501)

    def test_non_positive_ids_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CreateCommentRequest(author_id=0, post_id=1, content="Hi")
