"""Test configuration and fixtures."""

from blog.domain.model import Comment, CommentDraft, Post
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentId, PostId, UserId


def make_post(
    post_id: int = 1, author_id: int = 100, published: bool = True
) -> Post:
    """Helper to build a post for comment tests."""
    return Post(
        id=PostId(post_id),
        author_id=UserId(author_id),
        title=f"Post {post_id}",
        content="Post content",
        published=published,
    )


async def save_post(
    post_repo: PostRepository,
    post_id: int = 1,
    author_id: int = 100,
    published: bool = True,
) -> Post:
    """Helper to store a post in the repository."""
    return await post_repo.save(make_post(post_id, author_id, published))


async def add_comment(
    comment_repo: CommentRepository,
    post_id: int,
    author_id: int,
    content: str = "A comment",
    parent_comment_id: int | None = None,
    target_user_id: int | None = None,
) -> Comment:
    """Helper to write a comment straight to the store, skipping validation."""
    return await comment_repo.create(
        CommentDraft(
            author_id=UserId(author_id),
            post_id=PostId(post_id),
            content=content,
            parent_comment_id=CommentId(parent_comment_id)
            if parent_comment_id
            else None,
            target_user_id=UserId(target_user_id) if target_user_id else None,
        )
    )
