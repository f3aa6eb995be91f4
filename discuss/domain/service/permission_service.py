"""Permission domain service."""

from discuss.domain.model.post import Post
from discuss.domain.model.reply import Reply
from discuss.domain.value import UserId

from .base import Service


class PermissionService(Service):
    """Domain service answering who may change what.

    Every rule here is authorship: only a post's author curates it, only a
    reply's author edits it.
    """

    def can_edit_post(self, post: Post, user_id: UserId) -> bool:
        """Check if a user can edit a post."""
        return post.author_id == user_id

    def can_edit_reply(self, reply: Reply, user_id: UserId) -> bool:
        """Check if a user can edit a reply."""
        return reply.author_id == user_id

    def can_mark_best_answer(self, post: Post, user_id: UserId) -> bool:
        """Check if a user can choose the best answer of a post."""
        return post.author_id == user_id
