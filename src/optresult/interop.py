"""Conversions between Option, Result and Python's native ``None``/exceptions.

``run_catching`` and ``catching`` are the only places where a raised
exception is turned into a value; everything else in the package is total.
"""

from __future__ import annotations

from functools import wraps
import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar, overload

from optresult.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from optresult.option import Option
    from optresult.result import Result

log = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
X = TypeVar("X", bound=BaseException)
P = ParamSpec("P")


# --- Option <-> Result ---


def option_to_result(option: Option[T], error: E) -> Result[T, E]:
    """Same as ``option.ok_or(error)``; *error* is built eagerly by the caller."""
    return option.ok_or(error)


def option_to_result_else(option: Option[T], error_factory: Callable[[], E]) -> Result[T, E]:
    return option.ok_or_else(error_factory)


def transpose_option(option: Option[Result[T, E]]) -> Result[Option[T], E]:
    """``Nothing -> Ok(Nothing)``, ``Some(Ok(v)) -> Ok(Some(v))``, ``Some(Err(e)) -> Err(e)``."""
    return option.transpose()


def transpose_result(result: Result[Option[T], E]) -> Option[Result[T, E]]:
    """``Ok(Nothing) -> Nothing``, ``Ok(Some(v)) -> Some(Ok(v))``, ``Err(e) -> Some(Err(e))``."""
    return result.transpose()


# --- Host None -> Result ---


def to_result(value: T | None, error: E) -> Result[T, E]:
    """``Ok(value)`` unless *value* is ``None``, in which case ``Err(error)``."""
    return Err(error) if value is None else Ok(value)


def to_result_else(value: T | None, error_factory: Callable[[], E]) -> Result[T, E]:
    """Like ``to_result`` but builds the error only when *value* is ``None``."""
    return Err(error_factory()) if value is None else Ok(value)


# --- Exceptions -> Result ---


def _log_captured(fn: Callable[..., Any], exc: BaseException) -> None:
    log.debug(
        "Captured %s from %s: %s",
        type(exc).__name__,
        getattr(fn, "__qualname__", repr(fn)),
        exc,
    )


def run_catching(
    fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> Result[T, Exception]:
    """Call ``fn(*args, **kwargs)`` and capture any ``Exception`` as ``Err``.

    ``BaseException`` subclasses that are not ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``, ``GeneratorExit``) propagate.

    Example:
        run_catching(int, "42")    # Ok(42)
        run_catching(int, "forty") # Err(ValueError(...))
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        _log_captured(fn, exc)
        return Err(exc)


@overload
def catching(fn: Callable[P, T], /) -> Callable[P, Result[T, Exception]]: ...


@overload
def catching(
    *exc_types: type[X],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, X]]]: ...


def catching(*args: Any) -> Any:
    """Decorator form of ``run_catching``.

    Used bare it captures every ``Exception``. Given exception types it
    captures only those; anything else propagates unchanged.

    Example:
        @catching(ValueError, KeyError)
        def load(raw: dict[str, str]) -> int:
            return int(raw["port"])
    """
    if len(args) == 1 and callable(args[0]) and not isinstance(args[0], type):
        return _catching((Exception,))(args[0])
    if not args:
        return _catching((Exception,))
    for exc_type in args:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(
                f"catching() expects exception types, got {exc_type!r}"
            )
    return _catching(tuple(args))


def _catching(
    exc_types: tuple[type[BaseException], ...],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]:
    def decorator(fn: Callable[P, T]) -> Callable[P, Result[T, Any]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
            try:
                return Ok(fn(*args, **kwargs))
            except exc_types as exc:
                _log_captured(fn, exc)
                return Err(exc)

        return wrapper

    return decorator

