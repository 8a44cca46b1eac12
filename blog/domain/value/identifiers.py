"""Strongly typed identifiers for blog entities.

Identifiers are positive integers assigned by storage. Comment ids double
as pagination cursors, so they are never reused or renumbered.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
