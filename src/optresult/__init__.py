"""optresult: Option and Result sum types with a combinator algebra.

Public API:
    - Option: ``Some`` / ``Nothing`` (singleton ``NOTHING``)
    - Result: ``Ok`` / ``Err``
    - run_catching() / catching: exceptions into ``Err``
    - Parsing, collection, string and validation helpers

Example:
    from optresult import Ok, Some, run_catching

    port = run_catching(int, raw).ok().filter(lambda p: p > 0).unwrap_or(8080)
"""

from __future__ import annotations

import logging

from optresult.config import Settings, current_settings, resolve_settings, settings_scope
from optresult.errors import ConfigurationError, OptResultError, ParseError, UnwrapError
from optresult.interop import (
    catching,
    option_to_result,
    option_to_result_else,
    run_catching,
    to_result,
    to_result_else,
    transpose_option,
    transpose_result,
)
from optresult.iterables import (
    collect_ok,
    element_at_or_nothing,
    errs,
    filter_map,
    filter_map_ok,
    find_or_nothing,
    first_or_nothing,
    get_or_nothing,
    last_or_nothing,
    max_or_nothing,
    min_or_nothing,
    oks,
    partition,
    single_or_nothing,
    values,
)
from optresult.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    bind_lookup,
    from_nullable,
    is_nothing,
    is_some,
    nothing,
    some,
    then,
    then_some,
    try_get,
)
from optresult.parsing import (
    parse,
    parse_bool,
    parse_bool_result,
    parse_decimal,
    parse_decimal_result,
    parse_enum,
    parse_enum_result,
    parse_float,
    parse_float_result,
    parse_int,
    parse_int_result,
    parse_number,
    parse_number_result,
    parse_result,
)
from optresult.result import Err, Ok, Result, err, is_err, is_ok, ok
from optresult.strings import (
    fullmatch_or_nothing,
    search_or_nothing,
    substring_after_or_nothing,
    substring_before_or_nothing,
    substring_or_nothing,
)
from optresult.validation import validate, validate_all

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("optresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("optresult").addHandler(logging.NullHandler())

__all__ = [
    "NOTHING",
    "ConfigurationError",
    "Err",
    "Nothing",
    "Ok",
    "OptResultError",
    "Option",
    "ParseError",
    "Result",
    "Settings",
    "Some",
    "UnwrapError",
    "bind_lookup",
    "catching",
    "collect_ok",
    "current_settings",
    "element_at_or_nothing",
    "err",
    "errs",
    "filter_map",
    "filter_map_ok",
    "find_or_nothing",
    "first_or_nothing",
    "from_nullable",
    "fullmatch_or_nothing",
    "get_or_nothing",
    "is_err",
    "is_nothing",
    "is_ok",
    "is_some",
    "last_or_nothing",
    "max_or_nothing",
    "min_or_nothing",
    "nothing",
    "ok",
    "oks",
    "option_to_result",
    "option_to_result_else",
    "parse",
    "parse_bool",
    "parse_bool_result",
    "parse_decimal",
    "parse_decimal_result",
    "parse_enum",
    "parse_enum_result",
    "parse_float",
    "parse_float_result",
    "parse_int",
    "parse_int_result",
    "parse_number",
    "parse_number_result",
    "parse_result",
    "partition",
    "resolve_settings",
    "run_catching",
    "search_or_nothing",
    "settings_scope",
    "single_or_nothing",
    "some",
    "substring_after_or_nothing",
    "substring_before_or_nothing",
    "substring_or_nothing",
    "then",
    "then_some",
    "to_result",
    "to_result_else",
    "transpose_option",
    "transpose_result",
    "try_get",
    "validate",
    "validate_all",
    "values",
]
