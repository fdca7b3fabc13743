"""Option: a value that is either present (``Some``) or absent (``Nothing``).

``Option[T]`` is a closed union of two final classes. Values are immutable
and every combinator returns a new Option (or a plain value); only
``unwrap`` and ``expect`` can raise.

Example:
    ```python
    from optresult import Some, NOTHING, from_nullable

    port = from_nullable(env.get("PORT")).map(int).unwrap_or(8080)

    match lookup(key):
        case Some(value):
            use(value)
        case Nothing():
            fallback()
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Final,
    Generic,
    Literal,
    NoReturn,
    TypeAlias,
    TypeVar,
    Union,
    final,
)

from optresult.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from optresult.result import Result

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")
K = TypeVar("K")


@final
@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """An Option holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __bool__(self) -> Literal[True]:
        return True

    # --- Queries ---

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def contains(self, value: object) -> bool:
        return self.value == value

    # --- Transformations ---

    def map(self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else(self, default_factory: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NOTHING

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        f(self.value)
        return self

    def flatten(self: Some[Option[U]]) -> Option[U]:
        return self.value

    # --- Combination ---

    def or_(self, other: Option[T]) -> Some[T]:
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Some[T]:
        return self

    def and_(self, other: Option[U]) -> Option[U]:
        return other

    def xor(self, other: Option[T]) -> Option[T]:
        return NOTHING if isinstance(other, Some) else self

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return NOTHING

    def zip_with(self, other: Option[U], f: Callable[[T, U], V]) -> Option[V]:
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return NOTHING

    # --- Extraction ---

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        return on_some(self.value)

    def to_nullable(self) -> T:
        return self.value

    # --- Conversion to Result ---

    def ok_or(self, error: E) -> Result[T, E]:
        from optresult.result import Ok

        return Ok(self.value)

    def ok_or_else(self, error_factory: Callable[[], E]) -> Result[T, E]:
        from optresult.result import Ok

        return Ok(self.value)

    def transpose(self: Some[Result[U, E]]) -> Result[Option[U], E]:
        """Turn ``Some(Ok(v))`` into ``Ok(Some(v))`` and ``Some(Err(e))`` into ``Err(e)``."""
        from optresult.result import Ok

        inner = self.value
        if isinstance(inner, Ok):
            return Ok(Some(inner.value))
        return inner


@final
class Nothing:
    """The absent Option. There is exactly one instance, ``NOTHING``.

    Calling ``Nothing()`` returns that instance, which also makes
    ``case Nothing():`` usable in ``match`` statements.
    """

    __slots__ = ()
    __match_args__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        return (Nothing, ())

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> Literal[False]:
        return False

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def is_some_and(self, predicate: Callable[[Any], bool]) -> Literal[False]:
        return False

    def is_none_or(self, predicate: Callable[[Any], bool]) -> Literal[True]:
        return True

    def contains(self, value: object) -> Literal[False]:
        return False

    def map(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def map_or(self, default: U, f: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, default_factory: Callable[[], U], f: Callable[[Any], U]) -> U:
        return default_factory()

    def and_then(self, f: Callable[[Any], Option[U]]) -> Nothing:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Nothing:
        return self

    def inspect(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def flatten(self) -> Nothing:
        return self

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def and_(self, other: Option[U]) -> Nothing:
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        return other

    def zip(self, other: Option[U]) -> Nothing:
        return self

    def zip_with(self, other: Option[U], f: Callable[[Any, U], V]) -> Nothing:
        return self

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Called unwrap on a Nothing value", container=self)

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message, container=self)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def match(self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:
        return on_none()

    def to_nullable(self) -> None:
        return None

    def ok_or(self, error: E) -> Result[Any, E]:
        from optresult.result import Err

        return Err(error)

    def ok_or_else(self, error_factory: Callable[[], E]) -> Result[Any, E]:
        from optresult.result import Err

        return Err(error_factory())

    def transpose(self) -> Result[Nothing, Any]:
        from optresult.result import Ok

        return Ok(self)


NOTHING: Final[Nothing] = Nothing()

Option: TypeAlias = Union[Some[T], Nothing]


# --- Factories ---


def some(value: T) -> Option[T]:
    """Wrap *value* in ``Some``; ``some(None)`` is ``Some(None)``."""
    return Some(value)


def nothing() -> Nothing:
    return NOTHING


def from_nullable(value: T | None) -> Option[T]:
    """Bridge from Python's ``None``: ``None`` becomes ``Nothing``, anything else ``Some``."""
    return NOTHING if value is None else Some(value)


def then(condition: bool, factory: Callable[[], T]) -> Option[T]:
    """Return ``Some(factory())`` when *condition* holds; *factory* runs only then."""
    return Some(factory()) if condition else NOTHING


def then_some(condition: bool, value: T) -> Option[T]:
    return Some(value) if condition else NOTHING


def try_get(getter: Callable[[], tuple[bool, T]]) -> Option[T]:
    """Adapt a ``(found, value)`` style getter.

    Returns ``Nothing`` when the getter reports ``found=False`` or raises an
    ``Exception``.
    """
    try:
        found, value = getter()
    except Exception:
        return NOTHING
    return Some(value) if found else NOTHING


def bind_lookup(lookup: Callable[[K], tuple[bool, T]]) -> Callable[[K], Option[T]]:
    """Turn a ``(key) -> (found, value)`` lookup into ``(key) -> Option``."""

    def _lookup(key: K) -> Option[T]:
        found, value = lookup(key)
        return Some(value) if found else NOTHING

    return _lookup


def is_some(option: Option[T]) -> bool:
    """Return True for ``Some``; usable as a filter predicate."""
    return isinstance(option, Some)


def is_nothing(option: Option[T]) -> bool:
    return option is NOTHING
