"""
Outcome values returned by the service layer.

Service methods never raise for expected failures.  They return one of
``Ok``, ``InvalidInput`` or ``InternalFailure`` and leave it to the
caller (an HTTP endpoint, a test) to decide how each outcome is
presented.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class InvalidInput:
    """The caller's input was rejected before the store was touched."""

    message: str


@dataclass(frozen=True)
class InternalFailure:
    """The store failed.  ``cause`` is for logs only, never for clients."""

    cause: BaseException


ServiceResult = Union[Ok[Any], InvalidInput, InternalFailure]
