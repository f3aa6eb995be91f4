"""Strongly typed identifiers for discussion entities.

Identifiers are opaque strings handed to us by whatever store produced the
snapshot. NewType keeps reply, post and user ids from being mixed up.
"""

from typing import NewType

ReplyId = NewType("ReplyId", str)
PostId = NewType("PostId", str)
UserId = NewType("UserId", str)
