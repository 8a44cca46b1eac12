"""Thread validator: structural rules for new comments."""

import asyncio
from typing import Optional

import logfire

from blog.domain.error import (
    NotFoundError,
    StructuralError,
    ThreadViolation,
    ValidationError,
)
from blog.domain.model import CommentDraft, CommentSubmission, ParentThread, Post
from blog.domain.repository import ThreadLookupRepository
from blog.domain.value import CommentId, PostId, UserId

from .base import Service


class ThreadValidator(Service):
    """Checks a submission against the thread rules and resolves its write record.

    Rules:
    - a reply names both its parent comment and a target user; a top-level
      comment names neither
    - the post (direct or the parent's) exists and is published
    - the parent is itself top-level (threads are two levels deep)
    - the target user is the parent's author or already replied in the thread

    Validation only reads. The lookups run concurrently and are not a
    snapshot: a parent or post deleted between validation and write is
    not detected here.
    """

    def __init__(self, thread_lookup: ThreadLookupRepository) -> None:
        """Initialize thread validator.

        Args:
            thread_lookup: Read-only thread lookups
        """
        self.thread_lookup = thread_lookup

    async def validate_and_resolve(self, submission: CommentSubmission) -> CommentDraft:
        """Validate a submission and resolve the record to persist.

        Args:
            submission: New comment from an authenticated user

        Returns:
            Draft with post_id resolved, ready for the comment store

        Raises:
            StructuralError: If the reply/target pairing, depth or target is invalid
            NotFoundError: If the post or parent comment is missing or unpublished
            ValidationError: If neither a post nor a parent comment is given
        """
        with logfire.span(
            "thread_validator.validate_and_resolve",
            author_id=submission.author_id,
            post_id=submission.post_id,
            parent_comment_id=submission.parent_comment_id,
            target_user_id=submission.target_user_id,
        ):
            parent_id = submission.parent_comment_id
            target_id = submission.target_user_id

            if (parent_id is None) != (target_id is None):
                logfire.warn(
                    "Reply target mismatch",
                    parent_comment_id=parent_id,
                    target_user_id=target_id,
                )
                raise StructuralError(ThreadViolation.MUTUALLY_EXCLUSIVE_TARGET)

            if submission.post_id is None and parent_id is None:
                raise ValidationError("Either post_id or parent_comment_id is required")

            post, parent, target_replied = await asyncio.gather(
                self._find_post(submission.post_id),
                self._find_parent(parent_id),
                self._target_replied(parent_id, target_id),
            )

            if submission.post_id is not None and post is None:
                logfire.warn("Post not found or unpublished", post_id=submission.post_id)
                raise NotFoundError("post", str(submission.post_id))

            if parent_id is None:
                draft = CommentDraft(
                    author_id=submission.author_id,
                    post_id=submission.post_id,
                    content=submission.content,
                )
                logfire.info("Top-level comment validated", post_id=draft.post_id)
                return draft

            if parent is None:
                logfire.warn("Parent comment not found", parent_comment_id=parent_id)
                raise NotFoundError("parent-comment", str(parent_id))

            parent_comment = parent.comment
            if not parent.post_published:
                # Same answer as a missing post: don't reveal hidden threads
                logfire.warn(
                    "Parent comment belongs to unpublished post",
                    parent_comment_id=parent_id,
                )
                raise NotFoundError("post", str(parent_comment.post_id))

            if parent_comment.is_reply:
                logfire.warn(
                    "Reply to a reply rejected",
                    parent_comment_id=parent_id,
                    grandparent_comment_id=parent_comment.parent_comment_id,
                )
                raise StructuralError(ThreadViolation.DEPTH_EXCEEDED)

            if (
                submission.post_id is not None
                and parent_comment.post_id != submission.post_id
            ):
                logfire.warn(
                    "Parent comment does not belong to post",
                    parent_comment_id=parent_id,
                    parent_post_id=parent_comment.post_id,
                    post_id=submission.post_id,
                )
                raise NotFoundError("parent-comment", str(parent_id))

            if target_id != parent_comment.author_id and not target_replied:
                logfire.warn(
                    "Reply target is not part of the thread",
                    parent_comment_id=parent_id,
                    target_user_id=target_id,
                )
                raise StructuralError(
                    ThreadViolation.INVALID_TARGET,
                    f"user {target_id} is not a participant of thread {parent_id}",
                )

            draft = CommentDraft(
                author_id=submission.author_id,
                post_id=parent_comment.post_id,
                content=submission.content,
                parent_comment_id=parent_id,
                target_user_id=target_id,
            )
            logfire.info(
                "Reply validated",
                post_id=draft.post_id,
                parent_comment_id=parent_id,
                target_user_id=target_id,
            )
            return draft

    async def _find_post(self, post_id: Optional[PostId]) -> Optional[Post]:
        if post_id is None:
            return None
        return await self.thread_lookup.find_published_post(post_id)

    async def _find_parent(
        self, parent_id: Optional[CommentId]
    ) -> Optional[ParentThread]:
        if parent_id is None:
            return None
        return await self.thread_lookup.find_parent_thread(parent_id)

    async def _target_replied(
        self, parent_id: Optional[CommentId], target_id: Optional[UserId]
    ) -> bool:
        if parent_id is None or target_id is None:
            return False
        return await self.thread_lookup.reply_author_exists(parent_id, target_id)
