"""Unit tests for comment listing query values."""

import pydantic
import pytest

from blog.domain.error import ValidationError
from blog.domain.value import CommentId, CommentScope, CommentSort, PostId
from blog.domain.value.types import SortField, SortOrder


class TestCommentSortParse:
    """Tests for CommentSort.parse."""

    @pytest.mark.parametrize(
        "token, field, order",
        [
            ("+created", SortField.CREATED, SortOrder.ASC),
            ("-created", SortField.CREATED, SortOrder.DESC),
            ("+likes", SortField.LIKES, SortOrder.ASC),
            ("-likes", SortField.LIKES, SortOrder.DESC),
        ],
    )
    def test_valid_tokens(self, token, field, order):
        sort = CommentSort.parse(token)
        assert sort.by == field
        assert sort.order == order

    @pytest.mark.parametrize("token", ["", "+", "likes", "~likes", "+title", "-"])
    def test_invalid_tokens_raise_validation_error(self, token):
        with pytest.raises(ValidationError):
            CommentSort.parse(token)

    def test_default_is_newest_first(self):
        sort = CommentSort()
        assert sort.by == SortField.CREATED
        assert sort.descending

    def test_keys(self):
        """Likes order keys on (likes, id), created order on id alone."""
        assert CommentSort.parse("-likes").key(7, 3) == (3, 7)
        assert CommentSort.parse("-created").key(7, 3) == (7,)


class TestCommentScope:
    """Tests for CommentScope."""

    def test_top_level_scope(self):
        scope = CommentScope.top_level(PostId(1))
        assert scope.is_top_level
        assert scope.parent_comment_id is None

    def test_replies_scope(self):
        scope = CommentScope.replies(CommentId(5))
        assert not scope.is_top_level
        assert scope.post_id is None

    def test_both_ids_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CommentScope(post_id=PostId(1), parent_comment_id=CommentId(5))

    def test_no_ids_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CommentScope()
