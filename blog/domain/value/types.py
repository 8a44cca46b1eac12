"""Domain enumerations for the comment subsystem."""

from enum import Enum


class Role(str, Enum):
    """User role. Only consulted outside the comment core."""

    USER = "USER"
    ADMIN = "ADMIN"


class SortField(str, Enum):
    """Fields a comment listing can be ordered by."""

    CREATED = "created"
    LIKES = "likes"


class SortOrder(str, Enum):
    """Direction of a comment listing."""

    ASC = "asc"
    DESC = "desc"
