"""Result and violation types returned by the shelving rules engine.

Core operations never raise for rule violations. They return a
:class:`Result` carrying either a value or the first violation found, and the
caller decides how to surface it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, TypeVar, Union

from .models import ShelfType

T = TypeVar("T")
E = TypeVar("E")


class ViolationKind(str, enum.Enum):
    """Machine-readable tags for rule violations."""

    INVALID_SHELF_TYPE = "invalid_shelf_type"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class InvalidShelfType:
    """A shelf's type is not permitted for the warehouse's family."""

    shelf_type: ShelfType
    kind: ClassVar[ViolationKind] = ViolationKind.INVALID_SHELF_TYPE

    @property
    def message(self) -> str:
        return f"Shelf type not allowed for family: {self.shelf_type.value}"


@dataclass(frozen=True)
class CapacityExceeded:
    """The shelf count is above the warehouse's declared maximum."""

    count: int
    max_shelves: int
    kind: ClassVar[ViolationKind] = ViolationKind.CAPACITY_EXCEEDED

    @property
    def message(self) -> str:
        return f"Number of shelves ({self.count}) exceeds allowed maximum ({self.max_shelves})."


@dataclass(frozen=True)
class InvalidArgument:
    """A caller broke an operation's contract (e.g. negative length)."""

    reason: str
    kind: ClassVar[ViolationKind] = ViolationKind.INVALID_ARGUMENT

    @property
    def message(self) -> str:
        return self.reason


ShelfRuleViolation = Union[InvalidShelfType, CapacityExceeded]


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of a core operation: a value on success, an error otherwise.

    Attributes:
        value: Payload of a successful operation (``None`` for unit results).
        error: The violation that stopped the operation, if any.
    """

    value: Optional[T] = None
    error: Optional[E] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: E) -> "Result[T, E]":
        return cls(error=error)
