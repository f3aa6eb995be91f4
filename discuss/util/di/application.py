"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.best_answer import (
    MarkBestAnswerUseCase,
    UnmarkBestAnswerUseCase,
)
from discuss.application.usecase.thread import GetThreadUseCase
from discuss.application.usecase.vote import CastVoteUseCase
from discuss.domain.service import BestAnswerService, ThreadService, VoteService
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_service: ThreadService,
        vote_service: VoteService,
        best_answer_service: BestAnswerService,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service,
            vote_service=vote_service,
            best_answer_service=best_answer_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Best answer use cases
    @provide(scope=Scope.REQUEST)
    def get_mark_best_answer_use_case(
        self, best_answer_service: BestAnswerService
    ) -> MarkBestAnswerUseCase:
        """Provide mark best answer use case."""
        return MarkBestAnswerUseCase(best_answer_service=best_answer_service)

    @provide(scope=Scope.REQUEST)
    def get_unmark_best_answer_use_case(
        self, best_answer_service: BestAnswerService
    ) -> UnmarkBestAnswerUseCase:
        """Provide unmark best answer use case."""
        return UnmarkBestAnswerUseCase(best_answer_service=best_answer_service)
