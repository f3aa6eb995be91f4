"""Vote domain service."""

from collections.abc import Sequence
from typing import TypeVar

import logfire

from discuss.domain.model.post import Post
from discuss.domain.model.reply import Reply
from discuss.domain.model.vote import VoteState
from discuss.domain.value import ReplyId, ScoreTone, VoteType

from .base import Service

# Counter contribution of each viewer state: (upvotes, downvotes)
_CONTRIBUTION: dict[VoteType, tuple[int, int]] = {
    VoteType.UP: (1, 0),
    VoteType.DOWN: (0, 1),
    VoteType.NONE: (0, 0),
}

VotableModel = TypeVar("VotableModel", Post, Reply)


class VoteService(Service):
    """Domain service for vote operations.

    Business rules:
    - One vote per viewer per item, either up or down
    - Casting the vote the viewer already has clears it (toggle-off)
    - Switching direction moves the viewer's vote between counters
    """

    def apply_vote(
        self, state: VoteState, requested: VoteType | str | None
    ) -> VoteState:
        """Calculate the tally after a viewer's vote action.

        The viewer's previous vote is withdrawn first, then the new one is
        counted unless it repeats the previous one.

        Args:
            state: Current tally and viewer vote
            requested: Vote to apply (up, down, or None/none to remove)

        Returns:
            New vote state with score recomputed
        """
        requested = VoteType.NONE if requested is None else VoteType(requested)
        current = state.viewer_vote
        final = VoteType.NONE if requested == current else requested

        removed_up, removed_down = _CONTRIBUTION[current]
        added_up, added_down = _CONTRIBUTION[final]
        return VoteState(
            upvotes=state.upvotes - removed_up + added_up,
            downvotes=state.downvotes - removed_down + added_down,
            viewer_vote=final,
        )

    def vote_on_reply(self, reply: Reply, requested: VoteType | str | None) -> Reply:
        """Apply a vote to a reply.

        Returns:
            Patched copy of the reply
        """
        with logfire.span("vote_on_reply", reply_id=str(reply.id)):
            return self._patch(reply, requested)

    def vote_on_post(self, post: Post, requested: VoteType | str | None) -> Post:
        """Apply a vote to a post.

        Returns:
            Patched copy of the post
        """
        with logfire.span("vote_on_post", post_id=str(post.id)):
            return self._patch(post, requested)

    def vote_in_collection(
        self,
        replies: Sequence[Reply],
        reply_id: ReplyId,
        requested: VoteType | str | None,
    ) -> list[Reply]:
        """Apply a vote to one reply of a flat collection.

        Args:
            replies: Flat replies of a post
            reply_id: Reply being voted on
            requested: Vote to apply

        Returns:
            New list with the matching reply patched; unchanged if no reply
            matches
        """
        with logfire.span("vote_in_collection", reply_id=str(reply_id)):
            found = False
            result: list[Reply] = []
            for reply in replies:
                if reply.id == reply_id:
                    found = True
                    result.append(self._patch(reply, requested))
                else:
                    result.append(reply)
            if not found:
                logfire.warn("Vote on unknown reply", reply_id=str(reply_id))
            return result

    def format_score(self, score: int) -> str:
        """Format a vote score for display, signed when non-zero."""
        if score == 0:
            return "0"
        return f"+{score}" if score > 0 else str(score)

    def score_tone(self, score: int) -> ScoreTone:
        """Classify a vote score for display."""
        if score > 0:
            return ScoreTone.POSITIVE
        if score < 0:
            return ScoreTone.NEGATIVE
        return ScoreTone.NEUTRAL

    def _patch(
        self, item: VotableModel, requested: VoteType | str | None
    ) -> VotableModel:
        before = VoteState.of(item)
        after = self.apply_vote(before, requested)
        logfire.info(
            "Vote applied",
            previous_vote=before.viewer_vote.value,
            viewer_vote=after.viewer_vote.value,
            score=after.score,
        )
        return item.model_copy(
            update={
                "upvotes": after.upvotes,
                "downvotes": after.downvotes,
                "viewer_vote": after.viewer_vote,
            }
        )
