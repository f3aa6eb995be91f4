"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import ThreadingSettings
from discuss.domain.service import (
    BestAnswerService,
    PermissionService,
    ThreadService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are stateless, so one instance serves the whole app.
    """

    scope = Scope.APP

    @provide
    def get_thread_service(self, settings: ThreadingSettings) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(settings=settings)

    @provide
    def get_vote_service(self) -> VoteService:
        """Provide vote domain service."""
        return VoteService()

    @provide
    def get_permission_service(self) -> PermissionService:
        """Provide permission domain service."""
        return PermissionService()

    @provide
    def get_best_answer_service(
        self, permission_service: PermissionService
    ) -> BestAnswerService:
        """Provide best answer domain service."""
        return BestAnswerService(permission_service=permission_service)
