"""Best answer domain service."""

from collections.abc import Sequence
from dataclasses import dataclass

import logfire

from discuss.domain.error import NotAuthorizedError, PostLockedError
from discuss.domain.model.post import Post
from discuss.domain.model.reply import Reply
from discuss.domain.value import ReplyId, UserId

from .base import Service
from .permission_service import PermissionService


@dataclass
class BestAnswerResult:
    """Outcome of a best answer change.

    The caller persists ``post`` and ``replies`` back to its own store.
    """

    post: Post
    replies: list[Reply]
    previous_best_answer_id: ReplyId | None


class BestAnswerService(Service):
    """Domain service keeping at most one accepted reply per post.

    Flags are re-derived across the whole collection on every change rather
    than toggled on the previous holder, so an inconsistent snapshot comes
    out consistent.
    """

    def __init__(self, permission_service: PermissionService) -> None:
        """Initialize best answer service.

        Args:
            permission_service: Permission domain service
        """
        self.permission_service = permission_service

    def mark_best_answer(
        self,
        post: Post,
        replies: Sequence[Reply],
        reply_id: ReplyId,
        user_id: UserId,
    ) -> BestAnswerResult:
        """Mark a reply as the post's best answer.

        Args:
            post: Post the replies belong to
            replies: Every reply of the post (flat)
            reply_id: Reply to accept
            user_id: Acting user

        Returns:
            Patched post and replies, plus the reply that lost the flag

        Raises:
            NotAuthorizedError: If the acting user is not the post author
            PostLockedError: If the post is locked
        """
        with logfire.span(
            "best_answer_service.mark_best_answer",
            post_id=str(post.id),
            reply_id=str(reply_id),
            user_id=str(user_id),
        ):
            self._check_can_change(post, user_id, "mark best answer on")

            previous = self._previous_holder(post, replies, reply_id)
            if not any(reply.id == reply_id for reply in replies):
                logfire.warn(
                    "Best answer is not among the post's replies",
                    post_id=str(post.id),
                    reply_id=str(reply_id),
                )

            result = BestAnswerResult(
                post=post.model_copy(update={"best_answer_id": reply_id}),
                replies=self._derive_flags(replies, reply_id),
                previous_best_answer_id=previous,
            )
            logfire.info(
                "Best answer marked",
                post_id=str(post.id),
                reply_id=str(reply_id),
                previous_best_answer_id=str(previous) if previous else None,
            )
            return result

    def unmark_best_answer(
        self,
        post: Post,
        replies: Sequence[Reply],
        reply_id: ReplyId,
        user_id: UserId,
    ) -> BestAnswerResult:
        """Withdraw a reply's best answer status.

        Only the post's current best answer can be withdrawn; any other id
        leaves the state as it is.

        Raises:
            NotAuthorizedError: If the acting user is not the post author
            PostLockedError: If the post is locked
        """
        with logfire.span(
            "best_answer_service.unmark_best_answer",
            post_id=str(post.id),
            reply_id=str(reply_id),
            user_id=str(user_id),
        ):
            self._check_can_change(post, user_id, "unmark best answer on")

            if post.best_answer_id != reply_id:
                logfire.info(
                    "Reply is not the best answer, nothing to unmark",
                    post_id=str(post.id),
                    reply_id=str(reply_id),
                )
                return BestAnswerResult(
                    post=post,
                    replies=list(replies),
                    previous_best_answer_id=post.best_answer_id,
                )

            logfire.info(
                "Best answer unmarked", post_id=str(post.id), reply_id=str(reply_id)
            )
            return BestAnswerResult(
                post=post.model_copy(update={"best_answer_id": None}),
                replies=self._derive_flags(replies, None),
                previous_best_answer_id=reply_id,
            )

    def find_best_answer(self, post: Post, replies: Sequence[Reply]) -> Reply | None:
        """Get the reply the post designates as best answer, if present."""
        if post.best_answer_id is None:
            return None
        return next(
            (reply for reply in replies if reply.id == post.best_answer_id), None
        )

    def _check_can_change(self, post: Post, user_id: UserId, action: str) -> None:
        if not self.permission_service.can_mark_best_answer(post, user_id):
            logfire.warn(
                "Best answer change by non-author",
                post_id=str(post.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(action, "post", str(post.id), str(user_id))
        if post.is_locked:
            logfire.warn("Best answer change on locked post", post_id=str(post.id))
            raise PostLockedError(str(post.id))

    @staticmethod
    def _previous_holder(
        post: Post, replies: Sequence[Reply], reply_id: ReplyId
    ) -> ReplyId | None:
        for reply in replies:
            if reply.is_best_answer and reply.id != reply_id:
                return reply.id
        if post.best_answer_id != reply_id:
            return post.best_answer_id
        return None

    @staticmethod
    def _derive_flags(
        replies: Sequence[Reply], reply_id: ReplyId | None
    ) -> list[Reply]:
        return [
            reply.model_copy(update={"is_best_answer": reply.id == reply_id})
            for reply in replies
        ]
