"""Value objects describing a comment listing query."""

from typing import Optional

from pydantic import model_validator

from blog.domain.error import ValidationError
from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import CommentId, PostId
from blog.domain.value.types import SortField, SortOrder


class CommentSort(ValueObject):
    """Closed sort enumeration: {created, likes} x {asc, desc}.

    Created order is keyed on the comment id, which storage assigns in
    creation order. Likes order is keyed on (likes, id) so ties stay stable.
    """

    by: SortField = SortField.CREATED
    order: SortOrder = SortOrder.DESC

    @classmethod
    def parse(cls, token: str) -> "CommentSort":
        """Decode a `+field` / `-field` token.

        `+` means ascending and `-` descending, e.g. `-created` or `+likes`.

        Raises:
            ValidationError: If the token is outside the allowed set
        """
        if len(token) < 2 or token[0] not in "+-":
            raise ValidationError(f"Invalid sort token: {token!r}")
        try:
            field = SortField(token[1:])
        except ValueError:
            raise ValidationError(f"Invalid sort field: {token[1:]!r}") from None
        order = SortOrder.ASC if token[0] == "+" else SortOrder.DESC
        return cls(by=field, order=order)

    @property
    def descending(self) -> bool:
        return self.order == SortOrder.DESC

    def key(self, comment_id: int, likes: int) -> tuple[int, ...]:
        """Keyset position of a row under this sort."""
        if self.by == SortField.LIKES:
            return (likes, comment_id)
        return (comment_id,)


class CommentScope(ValueObject):
    """Which comments a listing covers.

    Exactly one of the two scopes is supported:
    - top-level comments of a post (post_id set, parent_comment_id None)
    - replies of a top-level comment (parent_comment_id set)
    """

    post_id: Optional[PostId] = None
    parent_comment_id: Optional[CommentId] = None

    @model_validator(mode="after")
    def validate_single_scope(self) -> "CommentScope":
        """Exactly one of post_id / parent_comment_id must be given."""
        if (self.post_id is None) == (self.parent_comment_id is None):
            raise ValueError(
                "Scope needs exactly one of post_id (top-level) or "
                "parent_comment_id (replies)"
            )
        return self

    @classmethod
    def top_level(cls, post_id: PostId) -> "CommentScope":
        return cls(post_id=post_id)

    @classmethod
    def replies(cls, parent_comment_id: CommentId) -> "CommentScope":
        return cls(parent_comment_id=parent_comment_id)

    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None
