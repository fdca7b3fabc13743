"""Exception hierarchy for optresult."""

from __future__ import annotations

from typing import Any


class OptResultError(Exception):
    """Base exception for all optresult errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(OptResultError):
    """An ``unwrap``/``expect`` call hit the wrong variant.

    This is a programmer-error signal. Callers wanting a recoverable path use
    the ``*_or`` / ``*_or_else`` / ``match`` family instead.
    """

    def __init__(
        self,
        message: str,
        *,
        container: Any,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        #: The Option or Result that was unwrapped.
        self.container = container


class ParseError(OptResultError):
    """A text-to-value conversion failed.

    Carried as the ``Err`` payload of the ``*_result`` parse helpers; it is
    never raised by the library itself.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str,
        target: Any,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.text = text
        self.target = target


class ConfigurationError(OptResultError):
    """Settings validation or resolution failed."""

