"""Request and response shared by the best answer use cases."""

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.model import Post, Reply
from discuss.domain.service import BestAnswerResult
from discuss.domain.value import ReplyId


class BestAnswerRequest(BaseModel):
    """Best answer request."""

    post: Post
    replies: list[Reply]
    reply_id: str
    user_id: str  # Acting user, must be the post author


class BestAnswerResponse(BaseModel):
    """Best answer response."""

    post_id: str
    best_answer_id: str | None
    previous_best_answer_id: str | None
    is_answered: bool
    post: Post
    replies: list[Reply]

    @classmethod
    def from_result(cls, result: BestAnswerResult) -> "BestAnswerResponse":
        """Build the response from a service result."""
        previous = result.previous_best_answer_id
        return cls(
            post_id=str(result.post.id),
            best_answer_id=result.post.best_answer_id,
            previous_best_answer_id=str(previous) if previous else None,
            is_answered=result.post.is_answered,
            post=result.post,
            replies=result.replies,
        )


def require_reply(replies: list[Reply], reply_id: ReplyId) -> None:
    """Raise NotFoundError unless the reply is in the collection."""
    if not any(reply.id == reply_id for reply in replies):
        raise NotFoundError("Reply", reply_id)
