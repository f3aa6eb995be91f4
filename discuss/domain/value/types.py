"""Enumerations used across the discussion domain."""

from enum import Enum


class VoteType(str, Enum):
    """A viewer's vote on a post or reply.

    NONE is the unvoted state. Requests may also pass None, which is read
    as NONE.
    """

    UP = "up"
    DOWN = "down"
    NONE = "none"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    REPLY = "reply"


class ReplySortOrder(str, Enum):
    """Sort order applied to every level of a reply tree."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    BEST = "best"  # score DESC
    CONTROVERSIAL = "controversial"  # upvotes + downvotes DESC


class ScoreTone(str, Enum):
    """How a vote score should be presented."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
