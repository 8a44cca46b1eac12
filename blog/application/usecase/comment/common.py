"""Shared request/response pieces for comment use cases."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from blog.domain.model import Comment
from blog.domain.model.comment import MAX_CONTENT_LENGTH

# Trimmed comment body, 1-500 characters after trimming
CommentContent = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=MAX_CONTENT_LENGTH
    ),
]

# Positive integer id as accepted from the boundary layer
PositiveId = Annotated[int, Field(gt=0)]


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    post_id: int
    author_id: int
    parent_comment_id: int | None
    target_user_id: int | None
    content: str
    likes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            parent_comment_id=comment.parent_comment_id,
            target_user_id=comment.target_user_id,
            content=comment.content,
            likes=comment.likes,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
