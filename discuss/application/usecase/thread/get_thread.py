"""Get thread use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from discuss.application.usecase.base import BaseUseCase
from discuss.config import MAX_NESTING_DEPTH
from discuss.domain.model import Post, Reply, ReplyNode
from discuss.domain.service import BestAnswerService, ThreadService, VoteService
from discuss.domain.value import ReplySortOrder, VoteType


class ThreadItem(BaseModel):
    """Reply in the nested thread response."""

    reply_id: str
    author_id: str
    author_name: str
    author_avatar: str | None
    content: str
    created_at: datetime
    updated_at: datetime | None
    upvotes: int
    downvotes: int
    score: int
    formatted_score: str
    viewer_vote: VoteType
    is_best_answer: bool
    depth: int
    replies: list["ThreadItem"]


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post: Post
    replies: list[Reply]
    sort: ReplySortOrder | None = None  # Settings default when omitted
    max_depth: int | None = Field(default=None, ge=0, le=MAX_NESTING_DEPTH)


class GetThreadResponse(BaseModel):
    """Get thread response."""

    post_id: str
    sort: ReplySortOrder
    replies: list[ThreadItem]
    total: int
    best_answer: ThreadItem | None


class GetThreadUseCase(BaseUseCase):
    """Use case for rendering a post's replies as a sorted, depth-limited tree."""

    def __init__(
        self,
        thread_service: ThreadService,
        vote_service: VoteService,
        best_answer_service: BestAnswerService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            vote_service: Vote domain service (score formatting)
            best_answer_service: Best answer domain service
        """
        self.thread_service = thread_service
        self.vote_service = vote_service
        self.best_answer_service = best_answer_service

    def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Steps:
        1. Build, flatten and sort the reply tree
        2. Convert nodes to response items, recording each item's depth
        3. Look up the accepted answer so it can be pinned above the thread

        Args:
            request: Get thread request with the post and its flat replies

        Returns:
            Nested replies with totals and the best answer
        """
        sort = request.sort or self.thread_service.settings.default_sort
        tree = self.thread_service.build_thread(
            request.replies, order=sort, max_depth=request.max_depth
        )

        def to_item(node: ReplyNode, depth: int) -> ThreadItem:
            """Convert a node and its (depth-limited) subtree."""
            return ThreadItem(
                reply_id=str(node.id),
                author_id=str(node.author_id),
                author_name=node.author_name,
                author_avatar=node.author_avatar,
                content=node.content,
                created_at=node.created_at,
                updated_at=node.updated_at,
                upvotes=node.upvotes,
                downvotes=node.downvotes,
                score=node.score,
                formatted_score=self.vote_service.format_score(node.score),
                viewer_vote=node.viewer_vote,
                is_best_answer=node.is_best_answer,
                depth=depth,
                replies=[to_item(child, depth + 1) for child in node.children],
            )

        items = [to_item(node, 0) for node in tree]

        best_answer = None
        best_reply = self.best_answer_service.find_best_answer(
            request.post, request.replies
        )
        if best_reply is not None:
            best_node = self.thread_service.find_reply_by_id(best_reply.id, tree)
            if best_node is not None:
                depth = self.thread_service.get_reply_depth(best_reply.id, tree)
                best_answer = to_item(best_node.with_children([]), depth)

        return GetThreadResponse(
            post_id=str(request.post.id),
            sort=sort,
            replies=items,
            total=self.thread_service.count_total_replies(tree),
            best_answer=best_answer,
        )
