"""Result: the outcome of an operation, either ``Ok(value)`` or ``Err(error)``.

The error payload is caller-defined and never inspected; it flows through
every combinator untouched until mapped, matched or unwrapped. Only the
``unwrap*``/``expect*`` family raises, and only on the wrong variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Literal,
    NoReturn,
    TypeAlias,
    TypeVar,
    Union,
    final,
)

from optresult.errors import UnwrapError
from optresult.option import NOTHING, Some

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from optresult.option import Nothing, Option

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")
F = TypeVar("F")


def _raise_from_err(message: str, container: Err[Any]) -> NoReturn:
    """Raise ``UnwrapError``, chaining the error payload when it is an exception."""
    err = UnwrapError(message, container=container)
    if isinstance(container.error, BaseException):
        raise err from container.error
    raise err


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful Result."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __bool__(self) -> Literal[True]:
        return True

    # --- Queries ---

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def is_err_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    def contains(self, value: object) -> bool:
        return self.value == value

    def contains_err(self, error: object) -> Literal[False]:
        return False

    # --- Transformations ---

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_factory: Callable[[Any], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def or_else(self, f: Callable[[Any], Result[T, F]]) -> Ok[T]:
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def flatten(self: Ok[Result[U, E]]) -> Result[U, E]:
        return self.value

    def filter(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        return self if predicate(self.value) else Err(error)

    def filter_else(
        self, predicate: Callable[[T], bool], error_factory: Callable[[], E]
    ) -> Result[T, E]:
        return self if predicate(self.value) else Err(error_factory())

    def select(self, f: Callable[[T], U]) -> Ok[U]:
        return self.map(f)

    def select_many(
        self,
        binder: Callable[[T], Result[U, E]],
        projector: Callable[[T, U], V],
    ) -> Result[V, E]:
        value = self.value
        return binder(value).map(lambda u: projector(value, u))

    # --- Combination ---

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def or_(self, other: Result[T, F]) -> Ok[T]:
        return self

    # --- Extraction ---

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"Called unwrap_err on an Ok value: {self.value}", container=self)

    def expect_err(self, message: str) -> NoReturn:
        raise UnwrapError(f"{message}: {self.value}", container=self)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        return self.value

    def unwrap_or_default(self) -> T:
        return self.value

    def to_nullable(self) -> T:
        return self.value

    def match(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        return ok(self.value)

    # --- Conversion to Option ---

    def ok(self) -> Some[T]:
        return Some(self.value)

    def err(self) -> Nothing:
        return NOTHING

    def transpose(self: Ok[Option[U]]) -> Option[Result[U, Any]]:
        """Turn ``Ok(Some(v))`` into ``Some(Ok(v))`` and ``Ok(Nothing)`` into ``Nothing``."""
        inner = self.value
        if isinstance(inner, Some):
            return Some(Ok(inner.value))
        return NOTHING


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed Result carrying a caller-defined error payload."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> Literal[False]:
        return False

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self.error)

    def contains(self, value: object) -> Literal[False]:
        return False

    def contains_err(self, error: object) -> bool:
        return self.error == error

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def map_or(self, default: U, f: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, default_factory: Callable[[E], U], f: Callable[[Any], U]) -> U:
        return default_factory(self.error)

    def and_then(self, f: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return f(self.error)

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        f(self.error)
        return self

    def flatten(self) -> Err[E]:
        return self

    def filter(self, predicate: Callable[[Any], bool], error: E) -> Err[E]:
        return self

    def filter_else(
        self, predicate: Callable[[Any], bool], error_factory: Callable[[], E]
    ) -> Err[E]:
        return self

    def select(self, f: Callable[[Any], Any]) -> Err[E]:
        return self

    def select_many(
        self,
        binder: Callable[[Any], Result[U, E]],
        projector: Callable[[Any, U], V],
    ) -> Err[E]:
        return self

    def and_(self, other: Result[U, E]) -> Err[E]:
        return self

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def unwrap(self) -> NoReturn:
        _raise_from_err(f"Called unwrap on an Err value: {self.error}", self)

    def expect(self, message: str) -> NoReturn:
        _raise_from_err(f"{message}: {self.error}", self)

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def unwrap_or_default(self) -> None:
        return None

    def to_nullable(self) -> None:
        return None

    def match(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def ok(self) -> Nothing:
        return NOTHING

    def err(self) -> Some[E]:
        return Some(self.error)

    def transpose(self) -> Some[Err[E]]:
        return Some(self)


Result: TypeAlias = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)


def is_ok(result: Result[T, E]) -> bool:
    """Return True for ``Ok``; usable as a filter predicate."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> bool:
    return isinstance(result, Err)
