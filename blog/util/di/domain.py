"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import CommentSettings
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    ThreadLookupRepository,
)
from blog.domain.service import (
    CommentService,
    OwnershipGuard,
    PaginationService,
    ThreadValidator,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment store service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_thread_validator(
        self, thread_lookup: ThreadLookupRepository
    ) -> ThreadValidator:
        """Provide thread validator."""
        return ThreadValidator(thread_lookup=thread_lookup)

    @provide
    def get_pagination_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> PaginationService:
        """Provide pagination engine."""
        return PaginationService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            settings=settings,
        )

    @provide
    def get_ownership_guard(self, comment_service: CommentService) -> OwnershipGuard:
        """Provide ownership guard for comment mutations."""
        return OwnershipGuard(comment_service=comment_service)
