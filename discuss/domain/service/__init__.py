"""Domain services."""

from .base import Service
from .best_answer_service import BestAnswerResult, BestAnswerService
from .permission_service import PermissionService
from .thread_service import NOT_FOUND, ThreadService
from .vote_service import VoteService

__all__ = [
    "BestAnswerResult",
    "BestAnswerService",
    "NOT_FOUND",
    "PermissionService",
    "Service",
    "ThreadService",
    "VoteService",
]
