"""Validate plain values into Results.

``validate`` checks a single rule. ``validate_all`` runs every rule and
reports every failure, in rule order; unlike ``and_then`` chains it never
stops at the first failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from optresult.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from optresult.result import Result

T = TypeVar("T")
E = TypeVar("E")


def validate(value: T, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
    """``Ok(value)`` if *predicate* holds, otherwise ``Err(error)``."""
    return Ok(value) if predicate(value) else Err(error)


def validate_all(value: T, *validators: Callable[[T], Result[object, E]]) -> Result[T, list[E]]:
    """Run every validator against *value* and accumulate their errors.

    Returns ``Ok(value)`` when all pass, else ``Err`` of the failing
    validators' errors in the order the validators were given. Validators
    run once each, in order, even after a failure.

    Example:
        validate_all(
            "ab",
            lambda s: validate(s, str.isupper, "must be upper case"),
            lambda s: validate(s, lambda v: len(v) >= 3, "too short"),
        )  # Err(['must be upper case', 'too short'])
    """
    errors: list[E] = []
    for validator in validators:
        outcome = validator(value)
        if isinstance(outcome, Err):
            errors.append(outcome.error)
    return Err(errors) if errors else Ok(value)
