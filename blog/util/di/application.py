"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    ListCommentsWithTotalUseCase,
    UpdateCommentUseCase,
)
from blog.domain.service import (
    CommentService,
    OwnershipGuard,
    PaginationService,
    ThreadValidator,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        thread_validator: ThreadValidator,
        comment_service: CommentService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            thread_validator=thread_validator,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, pagination_service: PaginationService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(pagination_service=pagination_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_with_total_use_case(
        self, pagination_service: PaginationService
    ) -> ListCommentsWithTotalUseCase:
        """Provide counted list comments use case."""
        return ListCommentsWithTotalUseCase(pagination_service=pagination_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        ownership_guard: OwnershipGuard,
        comment_service: CommentService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            ownership_guard=ownership_guard,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        ownership_guard: OwnershipGuard,
        comment_service: CommentService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            ownership_guard=ownership_guard,
            comment_service=comment_service,
        )
