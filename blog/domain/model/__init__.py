"""Domain model entities for the blog comment subsystem."""

from blog.domain.model.comment import Comment, CommentDraft, CommentSubmission
from blog.domain.model.post import Post
from blog.domain.model.thread import CommentPage, CountedComments, ParentThread

__all__ = [
    "Post",
    "Comment",
    "CommentDraft",
    "CommentSubmission",
    "ParentThread",
    "CommentPage",
    "CountedComments",
]
