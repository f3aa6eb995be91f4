"""Domain value objects for discussions."""

from discuss.domain.value.identifiers import PostId, ReplyId, UserId
from discuss.domain.value.types import (
    ReplySortOrder,
    ScoreTone,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "ReplyId",
    "PostId",
    "UserId",
    # Types
    "VoteType",
    "VotableType",
    "ReplySortOrder",
    "ScoreTone",
]
