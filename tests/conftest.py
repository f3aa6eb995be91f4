"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from discuss.domain.model import Post, Reply
from discuss.domain.value import PostId, ReplyId, UserId

# Spans and events are created but neither printed nor sent anywhere
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_reply(
    reply_id: str,
    parent_id: str | None = None,
    minutes: int = 0,
    **overrides,
) -> Reply:
    """Helper function to build a flat reply for tests.

    Args:
        reply_id: Reply ID
        parent_id: Parent reply ID (None for top-level)
        minutes: Minutes after BASE_TIME the reply was created
        **overrides: Any other Reply field

    Returns:
        Reply entity
    """
    fields = {
        "id": ReplyId(reply_id),
        "content": f"Reply {reply_id}",
        "author_id": UserId("user-reader"),
        "author_name": "Reader",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
        "parent_reply_id": ReplyId(parent_id) if parent_id else None,
    }
    fields.update(overrides)
    return Reply(**fields)


def make_chain(length: int) -> list[Reply]:
    """Replies r1 -> r2 -> ... where each is the only child of the previous."""
    return [
        make_reply(f"r{i}", parent_id=f"r{i - 1}" if i > 1 else None, minutes=i)
        for i in range(1, length + 1)
    ]


def make_post(
    post_id: str = "post-1",
    author_id: str = "user-author",
    **overrides,
) -> Post:
    """Helper function to build a post for tests."""
    return Post(
        id=PostId(post_id),
        author_id=UserId(author_id),
        title="How do I pace a long novel?",
        **overrides,
    )
