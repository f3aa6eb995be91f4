"""Thread use cases."""

from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase, ThreadItem

__all__ = [
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ThreadItem",
]
