from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value. ``Some(None)`` is a legitimate present value."""

    value: T

    def is_present(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value."""

    def is_present(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return True


NOTHING: Nothing = Nothing()

Option = Union[Some[T], Nothing]


def of_nullable(value: T | None) -> Option[T]:
    if value is None:
        return NOTHING
    return Some(value)
