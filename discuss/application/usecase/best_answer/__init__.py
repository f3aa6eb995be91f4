"""Best answer use cases."""

from .common import BestAnswerRequest, BestAnswerResponse
from .mark_best_answer import MarkBestAnswerUseCase
from .unmark_best_answer import UnmarkBestAnswerUseCase

__all__ = [
    "BestAnswerRequest",
    "BestAnswerResponse",
    "MarkBestAnswerUseCase",
    "UnmarkBestAnswerUseCase",
]
