"""Vote tally value.

Votes are up/down and one per viewer per item. The tally for a single item,
as seen by a single viewer, is a ``VoteState``.
"""

from typing import Protocol

from pydantic import computed_field, field_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import VoteType


class Votable(Protocol):
    """Anything carrying a vote tally and the viewer's choice."""

    upvotes: int
    downvotes: int
    viewer_vote: VoteType


class VoteState(DomainModel):
    """Vote tally for one item as seen by one viewer.

    ``score`` is derived from the counters on every read and is never an
    input.
    """

    upvotes: int = 0
    downvotes: int = 0
    viewer_vote: VoteType = VoteType.NONE

    @field_validator("viewer_vote", mode="before")
    @classmethod
    def coerce_missing_vote(cls, v: object) -> object:
        """Read a null vote as the unvoted state."""
        return VoteType.NONE if v is None else v

    @computed_field
    @property
    def score(self) -> int:
        """Vote score (upvotes - downvotes)."""
        return self.upvotes - self.downvotes

    @classmethod
    def of(cls, item: Votable) -> "VoteState":
        """Read the tally off a post, reply or tree node."""
        return cls(
            upvotes=item.upvotes,
            downvotes=item.downvotes,
            viewer_vote=item.viewer_vote,
        )
