"""String slicing and regex lookups that report absence as ``Nothing``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from optresult.option import NOTHING, Some, from_nullable

if TYPE_CHECKING:
    from optresult.option import Option


def substring_or_nothing(text: str, start: int, end: int | None = None) -> Option[str]:
    """``text[start:end]`` when ``0 <= start <= end <= len(text)``, else ``Nothing``.

    Python slicing clamps silently; this helper treats out-of-range or
    inverted bounds as absence instead.
    """
    stop = len(text) if end is None else end
    if start < 0 or stop > len(text) or start > stop:
        return NOTHING
    return Some(text[start:stop])


def substring_before_or_nothing(
    text: str, delimiter: str, missing: str | None = None
) -> Option[str]:
    """Text before the first *delimiter*; *missing* (or ``Nothing``) if absent."""
    idx = text.find(delimiter)
    return from_nullable(missing) if idx < 0 else Some(text[:idx])


def substring_after_or_nothing(
    text: str, delimiter: str, missing: str | None = None
) -> Option[str]:
    """Text after the first *delimiter*; *missing* (or ``Nothing``) if absent."""
    idx = text.find(delimiter)
    return from_nullable(missing) if idx < 0 else Some(text[idx + len(delimiter) :])


def search_or_nothing(
    pattern: str | re.Pattern[str], text: str, pos: int = 0
) -> Option[re.Match[str]]:
    """First match of *pattern* in *text* starting at *pos*."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return from_nullable(compiled.search(text, pos))


def fullmatch_or_nothing(
    pattern: str | re.Pattern[str], text: str
) -> Option[re.Match[str]]:
    """The match object when *pattern* matches the whole of *text*."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return from_nullable(compiled.fullmatch(text))
