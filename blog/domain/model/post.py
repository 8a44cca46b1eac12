"""Post aggregate root.

Post authoring lives outside the comment core; the core only needs to know
whether a post exists and whether it is published.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    An unpublished post hides its whole comment thread: no new comments,
    no listings.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    published: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
