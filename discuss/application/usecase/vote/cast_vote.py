"""Cast vote use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import NotFoundError
from discuss.domain.model import Post, Reply, VoteState
from discuss.domain.service import VoteService
from discuss.domain.value import ReplyId, VotableType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    post: Post
    replies: list[Reply] = []
    reply_id: str | None = None  # Required when voting on a reply
    vote: VoteType | None = None  # None removes the viewer's vote


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    votable_id: str
    vote_state: VoteState
    formatted_score: str
    post: Post
    replies: list[Reply]


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a post or one of its replies."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New tally plus the patched post and replies to persist

        Raises:
            NotFoundError: If the reply is not part of the collection
        """
        post = request.post
        replies = list(request.replies)

        if request.votable_type == VotableType.POST:
            post = self.vote_service.vote_on_post(post, request.vote)
            votable_id = str(post.id)
            state = VoteState.of(post)
        else:  # VotableType.REPLY
            reply_id = ReplyId(request.reply_id or "")
            if not any(reply.id == reply_id for reply in replies):
                raise NotFoundError("Reply", reply_id)
            replies = self.vote_service.vote_in_collection(
                replies, reply_id, request.vote
            )
            voted = next(reply for reply in replies if reply.id == reply_id)
            votable_id = str(voted.id)
            state = VoteState.of(voted)

        return CastVoteResponse(
            votable_type=request.votable_type,
            votable_id=votable_id,
            vote_state=state,
            formatted_score=self.vote_service.format_score(state.score),
            post=post,
            replies=replies,
        )
