"""List comments use cases."""

from pydantic import BaseModel, Field, field_validator, model_validator

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PaginationService
from blog.domain.value import CommentId, CommentScope, CommentSort, PostId

from .common import CommentItem, PositiveId


class ListCommentsRequest(BaseModel):
    """List comments request.

    Give post_id for the top-level comments of a post, or
    parent_comment_id for the replies of a top-level comment.
    """

    post_id: PositiveId | None = None
    parent_comment_id: PositiveId | None = None
    sort: CommentSort = CommentSort()  # Also accepts "+likes" / "-created" tokens
    cursor: PositiveId | None = None  # next_cursor from the previous page
    limit: int | None = Field(default=None, ge=1)  # Clamped to the max page size

    @field_validator("sort", mode="before")
    @classmethod
    def parse_sort_token(cls, v: object) -> object:
        """Decode `+field` / `-field` sort tokens."""
        if isinstance(v, str):
            return CommentSort.parse(v)
        return v

    @model_validator(mode="after")
    def validate_single_scope(self) -> "ListCommentsRequest":
        """Exactly one of post_id / parent_comment_id must be given."""
        if (self.post_id is None) == (self.parent_comment_id is None):
            raise ValueError("Give either post_id or parent_comment_id")
        return self

    def scope(self) -> CommentScope:
        if self.parent_comment_id is not None:
            return CommentScope.replies(CommentId(self.parent_comment_id))
        return CommentScope.top_level(PostId(self.post_id))


class CommentPageResponse(BaseModel):
    """One page of comments."""

    items: list[CommentItem]
    next_cursor: int | None
    has_more: bool


class CountedCommentsResponse(BaseModel):
    """A page of comments with the scope's total count."""

    comments: list[CommentItem]
    total_comments: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for cursor-paginated comment listings."""

    def __init__(self, pagination_service: PaginationService) -> None:
        """Initialize list comments use case.

        Args:
            pagination_service: Pagination engine
        """
        self.pagination_service = pagination_service

    async def execute(self, request: ListCommentsRequest) -> CommentPageResponse:
        """List one page of top-level comments or replies.

        Args:
            request: Scope, sort, cursor and limit

        Returns:
            Page of comments with next_cursor and has_more

        Raises:
            NotFoundError: If the post/parent is missing or the post unpublished
            StructuralError: If the parent comment is itself a reply
        """
        page = await self.pagination_service.list_comments(
            scope=request.scope(),
            sort=request.sort,
            cursor=CommentId(request.cursor) if request.cursor else None,
            limit=request.limit,
        )
        return CommentPageResponse(
            items=[CommentItem.from_comment(c) for c in page.items],
            next_cursor=page.next_cursor,
            has_more=page.has_more,
        )


class ListCommentsWithTotalUseCase(BaseUseCase):
    """Use case for a comment listing that also reports the total count."""

    def __init__(self, pagination_service: PaginationService) -> None:
        """Initialize counted list comments use case.

        Args:
            pagination_service: Pagination engine
        """
        self.pagination_service = pagination_service

    async def execute(self, request: ListCommentsRequest) -> CountedCommentsResponse:
        """List one page of comments plus the number of comments in scope."""
        counted = await self.pagination_service.list_comments_with_total(
            scope=request.scope(),
            sort=request.sort,
            cursor=CommentId(request.cursor) if request.cursor else None,
            limit=request.limit,
        )
        return CountedCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in counted.comments],
            total_comments=counted.total_comments,
        )
