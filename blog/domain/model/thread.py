"""Read models used while validating and listing comment threads."""

from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId


class ParentThread(DomainModel):
    """A would-be parent comment together with its post's visibility."""

    comment: Comment
    post_published: bool


class CommentPage(DomainModel):
    """One window of a cursor-paginated listing.

    next_cursor is the id of the last item when more rows exist, None
    otherwise. Pass it back unchanged to fetch the following window.
    """

    items: list[Comment]
    next_cursor: Optional[CommentId] = None
    has_more: bool = False


class CountedComments(DomainModel):
    """A listing window plus the total number of comments in its scope."""

    comments: list[Comment]
    total_comments: int
