"""Collection and iterator helpers lifted into Option and Result.

A present element whose value is ``None`` is reported as ``Some(None)``;
absence is only ever signalled by ``Nothing``. Each helper consumes its
input at most once, in iteration order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import islice
from typing import TYPE_CHECKING, Any, TypeVar

from optresult.option import NOTHING, Some
from optresult.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from optresult.option import Option
    from optresult.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


def _matching(items: Iterable[T], predicate: Callable[[T], bool] | None) -> Iterable[T]:
    return items if predicate is None else filter(predicate, items)


# --- Element access ---


def first_or_nothing(
    items: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Option[T]:
    """First element (matching *predicate*, if given); stops at the first hit."""
    found = next(iter(_matching(items, predicate)), _MISSING)
    return NOTHING if found is _MISSING else Some(found)


def last_or_nothing(
    items: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Option[T]:
    if predicate is None and isinstance(items, Sequence):
        return Some(items[-1]) if items else NOTHING
    last = _MISSING
    for item in _matching(items, predicate):
        last = item
    return NOTHING if last is _MISSING else Some(last)


def single_or_nothing(
    items: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Option[T]:
    """The only element (matching *predicate*); ``Nothing`` for zero or several."""
    it = iter(_matching(items, predicate))
    first = next(it, _MISSING)
    if first is _MISSING or next(it, _MISSING) is not _MISSING:
        return NOTHING
    return Some(first)


def element_at_or_nothing(items: Iterable[T], index: int) -> Option[T]:
    """Element at a non-negative *index*; negative or out-of-range gives ``Nothing``."""
    if index < 0:
        return NOTHING
    if isinstance(items, Sequence):
        return Some(items[index]) if index < len(items) else NOTHING
    return first_or_nothing(islice(items, index, index + 1))


def get_or_nothing(mapping: Mapping[K, V], key: K) -> Option[V]:
    """``Some(mapping[key])`` if the key is present, even when its value is ``None``."""
    value = mapping.get(key, _MISSING)
    return NOTHING if value is _MISSING else Some(value)


def find_or_nothing(items: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    return first_or_nothing(items, predicate)


def max_or_nothing(items: Iterable[T], key: Callable[[T], Any] | None = None) -> Option[T]:
    """Largest element (by *key*); ties keep the first one seen."""
    found = max(items, key=key, default=_MISSING)
    return NOTHING if found is _MISSING else Some(found)


def min_or_nothing(items: Iterable[T], key: Callable[[T], Any] | None = None) -> Option[T]:
    found = min(items, key=key, default=_MISSING)
    return NOTHING if found is _MISSING else Some(found)


# --- Option streams ---


def values(options: Iterable[Option[T]]) -> list[T]:
    """Payloads of every ``Some``, in order; ``Nothing`` entries are dropped."""
    return [opt.value for opt in options if isinstance(opt, Some)]


def filter_map(items: Iterable[T], f: Callable[[T], Option[U]]) -> list[U]:
    """Apply *f* and keep the payloads of the ``Some`` results."""
    return values(f(item) for item in items)


# --- Result streams ---


def oks(results: Iterable[Result[T, E]]) -> list[T]:
    return [r.value for r in results if isinstance(r, Ok)]


def errs(results: Iterable[Result[T, E]]) -> list[E]:
    return [r.error for r in results if isinstance(r, Err)]


def filter_map_ok(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> list[U]:
    """Apply *f* and keep the ``Ok`` payloads; errors are discarded."""
    return oks(f(item) for item in items)


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split into ``(ok_values, errors)``, each preserving input order."""
    ok_values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            ok_values.append(result.value)
        else:
            errors.append(result.error)
    return ok_values, errors


def collect_ok(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """All-or-nothing collection.

    Returns the first ``Err`` in iteration order, without consuming the rest
    of the input, or ``Ok`` of every value in order.
    """
    collected: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        collected.append(result.value)
    return Ok(collected)
