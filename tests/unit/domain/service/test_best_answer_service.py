"""Unit tests for BestAnswerService."""

import pytest

from discuss.domain.error import NotAuthorizedError, PostLockedError
from discuss.domain.service import BestAnswerService, PermissionService
from discuss.domain.value import ReplyId, UserId
from tests.conftest import make_post, make_reply

AUTHOR = UserId("user-author")


@pytest.fixture
def best_answer_service():
    return BestAnswerService(permission_service=PermissionService())


@pytest.fixture
def replies():
    return [
        make_reply("r1"),
        make_reply("r2", parent_id="r1"),
        make_reply("r3"),
        make_reply("r4"),
        make_reply("r5", is_best_answer=True),
    ]


def flagged(replies) -> list[str]:
    return [reply.id for reply in replies if reply.is_best_answer]


class TestMarkBestAnswer:
    """Tests for mark_best_answer method."""

    def test_mark_best_answer_moves_flag(self, best_answer_service, replies):
        """Marking r2 clears r5, leaving exactly one best answer."""
        post = make_post(best_answer_id=ReplyId("r5"))

        result = best_answer_service.mark_best_answer(
            post, replies, ReplyId("r2"), AUTHOR
        )

        assert flagged(result.replies) == ["r2"]
        assert result.post.best_answer_id == "r2"
        assert result.post.is_answered is True
        assert result.previous_best_answer_id == "r5"

    def test_mark_best_answer_is_idempotent(self, best_answer_service, replies):
        post = make_post()

        first = best_answer_service.mark_best_answer(
            post, replies, ReplyId("r3"), AUTHOR
        )
        second = best_answer_service.mark_best_answer(
            first.post, first.replies, ReplyId("r3"), AUTHOR
        )

        assert second.post == first.post
        assert second.replies == first.replies
        assert second.previous_best_answer_id is None

    def test_mark_best_answer_heals_multiple_flags(self, best_answer_service):
        """An inconsistent snapshot with several flags comes out consistent."""
        replies = [
            make_reply("r1", is_best_answer=True),
            make_reply("r2"),
            make_reply("r3", is_best_answer=True),
        ]

        result = best_answer_service.mark_best_answer(
            make_post(), replies, ReplyId("r2"), AUTHOR
        )

        assert flagged(result.replies) == ["r2"]

    def test_mark_best_answer_does_not_mutate_input(
        self, best_answer_service, replies
    ):
        post = make_post()

        best_answer_service.mark_best_answer(post, replies, ReplyId("r2"), AUTHOR)

        assert post.best_answer_id is None
        assert flagged(replies) == ["r5"]

    def test_mark_best_answer_by_non_author_raises_error(
        self, best_answer_service, replies
    ):
        """Only the post author may choose the best answer."""
        with pytest.raises(NotAuthorizedError, match="not authorized"):
            best_answer_service.mark_best_answer(
                make_post(), replies, ReplyId("r2"), UserId("user-reader")
            )

    def test_mark_best_answer_unknown_reply_flags_nothing(
        self, best_answer_service, replies
    ):
        """An id outside the collection is stored but flags no reply."""
        result = best_answer_service.mark_best_answer(
            make_post(), replies, ReplyId("missing"), AUTHOR
        )

        assert result.post.best_answer_id == "missing"
        assert flagged(result.replies) == []


class TestUnmarkBestAnswer:
    """Tests for unmark_best_answer method."""

    def test_unmark_best_answer_clears_post_and_flags(self, best_answer_service):
        replies = [make_reply("r1", is_best_answer=True), make_reply("r2")]
        post = make_post(best_answer_id=ReplyId("r1"))

        result = best_answer_service.unmark_best_answer(
            post, replies, ReplyId("r1"), AUTHOR
        )

        assert result.post.best_answer_id is None
        assert result.post.is_answered is False
        assert flagged(result.replies) == []
        assert result.previous_best_answer_id == "r1"

    def test_unmark_other_reply_is_noop(self, best_answer_service):
        replies = [make_reply("r1", is_best_answer=True), make_reply("r2")]
        post = make_post(best_answer_id=ReplyId("r1"))

        result = best_answer_service.unmark_best_answer(
            post, replies, ReplyId("r2"), AUTHOR
        )

        assert result.post == post
        assert result.replies == replies

    def test_unmark_best_answer_by_non_author_raises_error(self, best_answer_service):
        post = make_post(best_answer_id=ReplyId("r1"))

        with pytest.raises(NotAuthorizedError):
            best_answer_service.unmark_best_answer(
                post, [make_reply("r1")], ReplyId("r1"), UserId("user-reader")
            )


class TestFindBestAnswer:
    """Tests for find_best_answer method."""

    def test_find_best_answer(self, best_answer_service, replies):
        post = make_post(best_answer_id=ReplyId("r3"))

        assert best_answer_service.find_best_answer(post, replies).id == "r3"

    def test_find_best_answer_unset(self, best_answer_service, replies):
        assert best_answer_service.find_best_answer(make_post(), replies) is None

    def test_find_best_answer_missing_reply(self, best_answer_service, replies):
        post = make_post(best_answer_id=ReplyId("gone"))

        assert best_answer_service.find_best_answer(post, replies) is None


class TestLockedPost:
    """Best answer changes are refused on locked posts."""

    def test_mark_best_answer_on_locked_post_raises_error(
        self, best_answer_service, replies
    ):
        post = make_post(is_locked=True)

        with pytest.raises(PostLockedError, match="locked post post-1"):
            best_answer_service.mark_best_answer(post, replies, ReplyId("r2"), AUTHOR)

    def test_unmark_best_answer_on_locked_post_raises_error(
        self, best_answer_service, replies
    ):
        post = make_post(best_answer_id=ReplyId("r5"), is_locked=True)

        with pytest.raises(PostLockedError):
            best_answer_service.unmark_best_answer(
                post, replies, ReplyId("r5"), AUTHOR
            )

    def test_locked_post_by_non_author_is_not_authorized(
        self, best_answer_service, replies
    ):
        """Authorship is checked before the lock."""
        post = make_post(is_locked=True)

        with pytest.raises(NotAuthorizedError):
            best_answer_service.mark_best_answer(
                post, replies, ReplyId("r2"), UserId("user-reader")
            )
