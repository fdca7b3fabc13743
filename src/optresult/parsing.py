"""Try-parse helpers: text to number, bool or enum without raising.

Every helper comes in two flavours. ``parse_x`` returns an Option and
``parse_x_result`` returns ``Result[value, ParseError]`` whose error chains
the underlying conversion failure. Conversion failures are caught here and
never escape as exceptions.

Boolean spellings, enum case sensitivity and number separators come from
``optresult.config.current_settings()`` unless passed explicitly.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from fractions import Fraction
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from optresult.config import current_settings
from optresult.errors import ParseError
from optresult.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from optresult.option import Option
    from optresult.result import Result

log = logging.getLogger(__name__)

T = TypeVar("T")
N = TypeVar("N", int, float, Decimal, Fraction)
EnumT = TypeVar("EnumT", bound=Enum)

# Exceptions a conversion may raise on bad input. Decimal raises
# InvalidOperation (an ArithmeticError); Fraction("1/0") raises ZeroDivisionError.
_CONVERSION_ERRORS: tuple[type[Exception], ...] = (ValueError, TypeError, ArithmeticError)

_NUMBER_TARGETS: tuple[type, ...] = (int, float, Decimal, Fraction)


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def _failure(text: Any, target: Any, cause: BaseException | None, reason: str) -> Err[ParseError]:
    error = ParseError(
        f"Cannot parse {text!r} as {_target_name(target)}: {reason}",
        text=text,
        target=target,
    )
    error.__cause__ = cause
    log.debug("Rejected parse: %s", error)
    return Err(error)


def _convert(text: Any, target: Any, convert: Callable[[Any], T]) -> Result[T, ParseError]:
    try:
        return Ok(convert(text))
    except _CONVERSION_ERRORS as exc:
        return _failure(text, target, exc, str(exc) or type(exc).__name__)


# --- Result flavour ---


def parse_int_result(text: str, base: int = 10) -> Result[int, ParseError]:
    """Parse an integer literal in *base* (``0`` honours ``0x``/``0o``/``0b`` prefixes)."""
    return _convert(text, int, lambda s: int(s, base))


def parse_float_result(text: str) -> Result[float, ParseError]:
    return _convert(text, float, float)


def parse_decimal_result(text: str) -> Result[Decimal, ParseError]:
    return _convert(text, Decimal, Decimal)


def parse_bool_result(
    text: str,
    *,
    true_tokens: tuple[str, ...] | None = None,
    false_tokens: tuple[str, ...] | None = None,
) -> Result[bool, ParseError]:
    """Parse a boolean from a case-insensitive token.

    Unlike ``bool(text)``, unrecognised text is a failure rather than ``True``.
    """
    if not isinstance(text, str):
        return _failure(text, bool, None, "expected a string")
    settings = current_settings()
    truthy = settings.true_tokens if true_tokens is None else true_tokens
    falsy = settings.false_tokens if false_tokens is None else false_tokens

    token = text.strip().lower()
    if token in {t.lower() for t in truthy}:
        return Ok(True)
    if token in {t.lower() for t in falsy}:
        return Ok(False)
    return _failure(text, bool, None, "not a recognised boolean token")


def parse_enum_result(
    text: str, enum_cls: type[EnumT], *, ignore_case: bool | None = None
) -> Result[EnumT, ParseError]:
    """Look up an enum member by name."""
    if not isinstance(text, str):
        return _failure(text, enum_cls, None, "expected a string")
    if ignore_case is None:
        ignore_case = current_settings().enum_ignore_case

    if ignore_case:
        wanted = text.casefold()
        for name, member in enum_cls.__members__.items():
            if name.casefold() == wanted:
                return Ok(member)
    elif text in enum_cls.__members__:
        return Ok(enum_cls.__members__[text])
    return _failure(text, enum_cls, None, f"no member named {text!r}")


def parse_number_result(
    text: str,
    target: type[N] = float,  # type: ignore[assignment]
    *,
    thousands_separator: str | None = None,
    decimal_separator: str | None = None,
) -> Result[N, ParseError]:
    """Parse a grouped, locale-style number such as ``"1,234.5"``.

    Grouping separators are dropped and the decimal separator is normalised
    before conversion. An ``int`` target truncates any fractional part
    toward zero.
    """
    if target not in _NUMBER_TARGETS:
        return _failure(text, target, None, "unsupported number type")
    if not isinstance(text, str):
        return _failure(text, target, None, "expected a string")

    settings = current_settings()
    thousands = settings.thousands_separator if thousands_separator is None else thousands_separator
    decimal = settings.decimal_separator if decimal_separator is None else decimal_separator
    if thousands == decimal:
        if thousands_separator is not None:
            return _failure(text, target, None, "separators must differ")
        # An explicit decimal separator displaces the ambient grouping one.
        thousands = ""

    normalized = text.strip()
    if thousands:
        normalized = normalized.replace(thousands, "")
    if decimal != ".":
        normalized = normalized.replace(decimal, ".")

    def _to_target(s: str) -> Any:
        value = Decimal(s)
        if target is int:
            return int(value)
        if target is float:
            return float(value)
        if target is Fraction:
            return Fraction(value)
        return value

    return _convert(normalized, target, _to_target)


_CONVERTERS: dict[type, Callable[[str], Result[Any, ParseError]]] = {
    bool: parse_bool_result,
    int: parse_int_result,
    float: parse_float_result,
    complex: lambda s: _convert(s, complex, complex),
    Decimal: parse_decimal_result,
    Fraction: lambda s: _convert(s, Fraction, Fraction),
}


def parse_result(text: str, target: type[T]) -> Result[T, ParseError]:
    """Parse *text* into *target*.

    Supported targets are ``bool``, ``int``, ``float``, ``complex``,
    ``Decimal``, ``Fraction`` and any ``Enum`` subclass. Any other target
    yields an ``Err`` rather than raising.
    """
    if not isinstance(target, type):
        return _failure(text, target, None, "target must be a type")
    converter = _CONVERTERS.get(target)
    if converter is not None:
        return converter(text)
    if issubclass(target, Enum):
        return parse_enum_result(text, target)  # type: ignore[return-value]
    return _failure(text, target, None, "unsupported parse target")


# --- Option flavour ---


def parse(text: str, target: type[T]) -> Option[T]:
    return parse_result(text, target).ok()


def parse_int(text: str, base: int = 10) -> Option[int]:
    return parse_int_result(text, base).ok()


def parse_float(text: str) -> Option[float]:
    return parse_float_result(text).ok()


def parse_decimal(text: str) -> Option[Decimal]:
    return parse_decimal_result(text).ok()


def parse_bool(
    text: str,
    *,
    true_tokens: tuple[str, ...] | None = None,
    false_tokens: tuple[str, ...] | None = None,
) -> Option[bool]:
    return parse_bool_result(text, true_tokens=true_tokens, false_tokens=false_tokens).ok()


def parse_enum(
    text: str, enum_cls: type[EnumT], *, ignore_case: bool | None = None
) -> Option[EnumT]:
    return parse_enum_result(text, enum_cls, ignore_case=ignore_case).ok()


def parse_number(
    text: str,
    target: type[N] = float,  # type: ignore[assignment]
    *,
    thousands_separator: str | None = None,
    decimal_separator: str | None = None,
) -> Option[N]:
    return parse_number_result(
        text,
        target,
        thousands_separator=thousands_separator,
        decimal_separator=decimal_separator,
    ).ok()
