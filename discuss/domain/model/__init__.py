"""Domain model entities for discussions."""

from discuss.domain.model.post import Post
from discuss.domain.model.reply import Reply, ReplyNode
from discuss.domain.model.vote import VoteState

__all__ = [
    "Post",
    "Reply",
    "ReplyNode",
    "VoteState",
]
