"""Reply entity and its tree form.

Replies arrive as a flat list where threading is encoded by
``parent_reply_id``. The thread service turns them into ``ReplyNode`` trees
for display.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from discuss.domain.model.common import DomainModel, as_utc, utc_now
from discuss.domain.value import ReplyId, UserId, VoteType


class Reply(DomainModel):
    """Reply entity (flat form).

    Threading is managed through:
    - parent_reply_id: Direct parent reply (None for top-level)
    - is_best_answer: Whether the post author accepted this reply
    """

    id: ReplyId
    content: str = Field(min_length=1, max_length=50000)
    author_id: UserId
    author_name: str
    author_avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    viewer_vote: VoteType = VoteType.NONE
    parent_reply_id: Optional[ReplyId] = None
    is_best_answer: bool = False

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime | None) -> datetime | None:
        """Store timestamps as aware UTC so they always compare."""
        return as_utc(v)

    @field_validator("viewer_vote", mode="before")
    @classmethod
    def coerce_missing_vote(cls, v: object) -> object:
        """Read a null vote as the unvoted state."""
        return VoteType.NONE if v is None else v

    @property
    def score(self) -> int:
        """Vote score (upvotes - downvotes)."""
        return self.upvotes - self.downvotes


@dataclass
class ReplyNode:
    """Node in a reply tree.

    Carries every reply field except ``parent_reply_id``; the parent link is
    positional. Each node owns its ``children`` list, and tree operations
    build new nodes instead of mutating existing ones.
    """

    id: ReplyId
    content: str
    author_id: UserId
    author_name: str
    created_at: datetime
    author_avatar: Optional[str] = None
    updated_at: Optional[datetime] = None
    upvotes: int = 0
    downvotes: int = 0
    viewer_vote: VoteType = VoteType.NONE
    is_best_answer: bool = False
    children: list["ReplyNode"] = field(default_factory=list)

    @classmethod
    def from_reply(cls, reply: Reply) -> "ReplyNode":
        """Create a childless node from a flat reply."""
        return cls(
            id=reply.id,
            content=reply.content,
            author_id=reply.author_id,
            author_name=reply.author_name,
            created_at=reply.created_at,
            author_avatar=reply.author_avatar,
            updated_at=reply.updated_at,
            upvotes=reply.upvotes,
            downvotes=reply.downvotes,
            viewer_vote=reply.viewer_vote,
            is_best_answer=reply.is_best_answer,
            children=[],
        )

    def with_children(self, children: list["ReplyNode"]) -> "ReplyNode":
        """Copy this node with a new children list."""
        return replace(self, children=children)

    @property
    def score(self) -> int:
        """Vote score (upvotes - downvotes)."""
        return self.upvotes - self.downvotes

    @property
    def engagement(self) -> int:
        """Total votes cast on this node, in either direction."""
        return self.upvotes + self.downvotes
