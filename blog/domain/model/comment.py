"""Comment entity.

Comments form a two-level tree stored as flat rows: a top-level comment
hangs off a post, a reply hangs off a top-level comment and addresses a
target user. Replies are never replied to directly; conversations inside a
thread branch through target users instead of deeper nesting.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId, UserId

MAX_CONTENT_LENGTH = 500


class CommentDraft(DomainModel):
    """A validated comment waiting to be written.

    Produced by the thread validator; post_id is already resolved (taken
    from the request or inherited from the parent comment).
    """

    author_id: UserId
    post_id: PostId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    target_user_id: Optional[UserId] = None

    @model_validator(mode="after")
    def validate_reply_target(self) -> "CommentDraft":
        """A reply always carries a target user, a top-level comment never does."""
        _check_reply_target(self.parent_comment_id, self.target_user_id)
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_comment_id: Top-level comment this replies to (None for top-level)
    - target_user_id: User the reply addresses (None for top-level)

    The id is assigned by storage, grows monotonically and is used as the
    pagination cursor.
    """

    id: CommentId
    author_id: UserId
    post_id: PostId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    target_user_id: Optional[UserId] = None
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_reply_target(self) -> "Comment":
        """A reply always carries a target user, a top-level comment never does."""
        _check_reply_target(self.parent_comment_id, self.target_user_id)
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None


def _check_reply_target(
    parent_comment_id: Optional[CommentId], target_user_id: Optional[UserId]
) -> None:
    if (parent_comment_id is None) != (target_user_id is None):
        raise ValueError(
            "parent_comment_id and target_user_id must be both set or both empty"
        )


class CommentSubmission(DomainModel):
    """A new comment as submitted by an authenticated user.

    Field types and lengths are already checked; the cross-entity thread
    rules are not. post_id may be omitted for replies, in which case it is
    inherited from the parent comment.
    """

    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    post_id: Optional[PostId] = None
    parent_comment_id: Optional[CommentId] = None
    target_user_id: Optional[UserId] = None
