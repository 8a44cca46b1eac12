"""Domain layer errors."""

from enum import Enum


class ThreadViolation(str, Enum):
    """Reason a comment was rejected by the thread structure rules."""

    MUTUALLY_EXCLUSIVE_TARGET = "mutually-exclusive-target"
    DEPTH_EXCEEDED = "depth-exceeded"
    INVALID_TARGET = "invalid-target"


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed or out-of-range input that slipped past the
    boundary layer (bad sort token, missing post and parent ids).
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    Unpublished posts are reported as not found so callers cannot probe
    for their existence.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StructuralError(DomainError):
    """Raised when a new comment would break the thread structure."""

    def __init__(self, violation: ThreadViolation, detail: str | None = None):
        self.violation = violation
        message = f"Thread structure violation: {violation.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to modify {resource} {resource_id}"
        )
