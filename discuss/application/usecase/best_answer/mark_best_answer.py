"""Mark best answer use case."""

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import BestAnswerService
from discuss.domain.value import ReplyId, UserId

from .common import BestAnswerRequest, BestAnswerResponse, require_reply


class MarkBestAnswerUseCase(BaseUseCase):
    """Use case for accepting a reply as the post's best answer."""

    def __init__(self, best_answer_service: BestAnswerService) -> None:
        """Initialize mark best answer use case.

        Args:
            best_answer_service: Best answer domain service
        """
        self.best_answer_service = best_answer_service

    def execute(self, request: BestAnswerRequest) -> BestAnswerResponse:
        """Execute mark best answer flow.

        Args:
            request: Best answer request

        Returns:
            Patched post and replies, with the reply that lost the flag

        Raises:
            NotFoundError: If the reply is not part of the collection
            NotAuthorizedError: If the user is not the post author
            PostLockedError: If the post is locked
        """
        reply_id = ReplyId(request.reply_id)
        require_reply(request.replies, reply_id)

        result = self.best_answer_service.mark_best_answer(
            post=request.post,
            replies=request.replies,
            reply_id=reply_id,
            user_id=UserId(request.user_id),
        )
        return BestAnswerResponse.from_result(result)
