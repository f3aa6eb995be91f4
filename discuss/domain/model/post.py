"""Post aggregate root.

A post owns a discussion thread and is the only place a best answer can be
designated from.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from discuss.domain.model.common import DomainModel, as_utc, utc_now
from discuss.domain.value import PostId, ReplyId, UserId, VoteType


class Post(DomainModel):
    """Post aggregate root.

    Only the fields the discussion engine reads are modelled: authorship,
    the vote tally, the accepted answer and whether the post is locked.
    """

    id: PostId
    author_id: UserId
    title: Optional[str] = Field(default=None, max_length=200)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    viewer_vote: VoteType = VoteType.NONE
    best_answer_id: Optional[ReplyId] = None
    is_locked: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store timestamps as aware UTC."""
        return as_utc(v)

    @field_validator("viewer_vote", mode="before")
    @classmethod
    def coerce_missing_vote(cls, v: object) -> object:
        """Read a null vote as the unvoted state."""
        return VoteType.NONE if v is None else v

    @property
    def is_answered(self) -> bool:
        """Whether the author has accepted a reply."""
        return self.best_answer_id is not None

    @property
    def score(self) -> int:
        """Vote score (upvotes - downvotes)."""
        return self.upvotes - self.downvotes
