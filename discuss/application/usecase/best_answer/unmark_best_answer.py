"""Unmark best answer use case."""

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import BestAnswerService
from discuss.domain.value import ReplyId, UserId

from .common import BestAnswerRequest, BestAnswerResponse, require_reply


class UnmarkBestAnswerUseCase(BaseUseCase):
    """Use case for withdrawing a post's best answer."""

    def __init__(self, best_answer_service: BestAnswerService) -> None:
        """Initialize unmark best answer use case.

        Args:
            best_answer_service: Best answer domain service
        """
        self.best_answer_service = best_answer_service

    def execute(self, request: BestAnswerRequest) -> BestAnswerResponse:
        """Execute unmark best answer flow.

        Raises:
            NotFoundError: If the reply is not part of the collection
            NotAuthorizedError: If the user is not the post author
            PostLockedError: If the post is locked
        """
        reply_id = ReplyId(request.reply_id)
        require_reply(request.replies, reply_id)

        result = self.best_answer_service.unmark_best_answer(
            post=request.post,
            replies=request.replies,
            reply_id=reply_id,
            user_id=UserId(request.user_id),
        )
        return BestAnswerResponse.from_result(result)
