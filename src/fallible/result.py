from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, cast

from .errors import PreconditionError
from .option import NOTHING, Nothing, Option, Some

E = TypeVar("E")
A = TypeVar("A")
F = TypeVar("F")
B = TypeVar("B")

_VARIANTS: frozenset[str] = frozenset({"Failure", "Success"})


def _require_callable(fn: object, role: str) -> None:
    if fn is None:
        raise PreconditionError(f"{role} is None")
    if not callable(fn):
        raise PreconditionError(f"{role} is not callable: {type(fn).__name__}")


def _require_result(obj: object, role: str) -> Result[Any, Any]:
    if not isinstance(obj, (Failure, Success)):
        raise TypeError(f"{role} must return a Result, got {type(obj).__name__}")
    return obj


class Result(ABC, Generic[E, A]):
    """Outcome of a computation: either ``Failure(E)`` or ``Success(A)``.

    The variant set is closed. Both variants carry the ``[E, A]`` shape but
    only hold one value; the inactive parameter is never read or built, so a
    variant can be returned unchanged under a new type parameter.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(f"Result is closed to subclassing: {cls.__qualname__}")
        super().__init_subclass__(**kwargs)

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[E, A]:
        if cls is Result:
            raise TypeError("use Result.success or Result.failure")
        return object.__new__(cls)

    @staticmethod
    def success(value: A) -> Result[E, A]:
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[E, A]:
        return Failure(error)

    @staticmethod
    def from_option(option: Option[B], error: F) -> Result[F, B]:
        """Lift an ``Option``: ``Some(v)`` becomes ``Success(v)``, ``Nothing``
        becomes ``Failure(error)``.

        Raises:
            PreconditionError: ``option`` is ``None`` or not an ``Option``, or
                ``error`` is ``None``.
        """
        if option is None:
            raise PreconditionError("option is None")
        if error is None:
            raise PreconditionError("error is None")
        if isinstance(option, Some):
            return Success(option.value)
        if isinstance(option, Nothing):
            return Failure(error)
        raise PreconditionError(f"expected Some or Nothing, got {type(option).__name__}")

    @abstractmethod
    def is_failure(self) -> bool:
        ...

    @abstractmethod
    def is_success(self) -> bool:
        ...

    @abstractmethod
    def to_option(self) -> Option[A]:
        """``Some(value)`` for a success, ``NOTHING`` for a failure."""

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> Result[E, B]:
        """Apply ``f`` to a success value; a failure is returned untouched.

        Raises:
            PreconditionError: ``f`` is not callable. Checked before anything
                else, on both variants.
        """

    @abstractmethod
    def map_f(self, f: Callable[[E], F]) -> Result[F, A]:
        """Apply ``f`` to a failure descriptor; a success is returned untouched."""

    def map_failure(self, f: Callable[[E], F]) -> Result[F, A]:
        return self.map_f(f)

    @abstractmethod
    def flat_map(self, f: Callable[[A], Result[E, B]]) -> Result[E, B]:
        """Like ``map`` but ``f`` returns a ``Result``, which is returned as is."""

    @abstractmethod
    def or_(self, other: Result[E, A] | Callable[[], Result[E, A]]) -> Result[E, A]:
        """Fallback on failure.

        ``other`` is either a ``Result`` or a zero-argument callable producing
        one. On a success it is ignored and never called.
        """

    @abstractmethod
    def or_else(self, supplier: Callable[[], Result[E, A]]) -> Result[E, A]:
        ...

    @abstractmethod
    def get_or_default(self, default: A) -> A:
        ...

    @abstractmethod
    def if_present(self, consumer: Callable[[A], object]) -> None:
        ...


@dataclass(frozen=True)
class Failure(Result[E, A]):
    value: E

    def is_failure(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def to_option(self) -> Option[A]:
        return NOTHING

    def map(self, f: Callable[[A], B]) -> Result[E, B]:
        _require_callable(f, "mapper")
        return cast(Result[E, B], self)

    def map_f(self, f: Callable[[E], F]) -> Result[F, A]:
        _require_callable(f, "mapper")
        return Failure(f(self.value))

    def flat_map(self, f: Callable[[A], Result[E, B]]) -> Result[E, B]:
        _require_callable(f, "mapper")
        return cast(Result[E, B], self)

    def or_(self, other: Result[E, A] | Callable[[], Result[E, A]]) -> Result[E, A]:
        if isinstance(other, (Failure, Success)):
            return other
        _require_callable(other, "fallback")
        return _require_result(other(), "fallback supplier")

    def or_else(self, supplier: Callable[[], Result[E, A]]) -> Result[E, A]:
        _require_callable(supplier, "supplier")
        return _require_result(supplier(), "supplier")

    def get_or_default(self, default: A) -> A:
        return default

    def if_present(self, consumer: Callable[[A], object]) -> None:
        _require_callable(consumer, "consumer")


@dataclass(frozen=True)
class Success(Result[E, A]):
    value: A

    def is_failure(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def to_option(self) -> Option[A]:
        return Some(self.value)

    def map(self, f: Callable[[A], B]) -> Result[E, B]:
        _require_callable(f, "mapper")
        return Success(f(self.value))

    def map_f(self, f: Callable[[E], F]) -> Result[F, A]:
        _require_callable(f, "mapper")
        return cast(Result[F, A], self)

    def flat_map(self, f: Callable[[A], Result[E, B]]) -> Result[E, B]:
        _require_callable(f, "mapper")
        return _require_result(f(self.value), "mapper")

    def or_(self, other: Result[E, A] | Callable[[], Result[E, A]]) -> Result[E, A]:
        return self

    def or_else(self, supplier: Callable[[], Result[E, A]]) -> Result[E, A]:
        _require_callable(supplier, "supplier")
        return self

    def get_or_default(self, default: A) -> A:
        return self.value

    def if_present(self, consumer: Callable[[A], object]) -> None:
        _require_callable(consumer, "consumer")
        consumer(self.value)


success = Result.success
failure = Result.failure
from_option = Result.from_option
