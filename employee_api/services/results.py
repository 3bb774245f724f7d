"""
Service Outcomes
=============================================================================
CONCEPT: Tagged Results Instead of Exceptions

Two failures are part of normal business flow, not bugs:
  - CONFLICT: the email is already used by another employee
  - NOT_FOUND: no employee has the requested id

Returning them as values makes every failure path visible at the call site:

    result = await service.get_by_id(7)
    if not result.ok:
        ...  # handle result.error

Unexpected store failures (lost connection, etc.) still raise.
=============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    The outcome of a service call.

    Attributes:
        value: The payload on success, None on failure.
        error: None on success, otherwise which failure happened.
        detail: Human-readable explanation of the failure.
    """

    value: T | None = None
    error: ErrorKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def conflict(cls, detail: str) -> "ServiceResult[T]":
        return cls(error=ErrorKind.CONFLICT, detail=detail)

    @classmethod
    def not_found(cls, detail: str) -> "ServiceResult[T]":
        return cls(error=ErrorKind.NOT_FOUND, detail=detail)
