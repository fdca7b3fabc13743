"""Settings schema and resolution for the parsing helpers.

Resolution precedence is ``defaults < environment < overrides``. Environment
variables use the ``OPTRESULT_`` prefix; list-valued fields are comma
separated. A ``.env`` file is only consulted when explicitly requested.

Example:
    with settings_scope(true_tokens=("true", "yes", "1")):
        parse_bool("yes")  # Some(True)
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from optresult.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "OPTRESULT_"

_LIST_FIELDS = frozenset({"true_tokens", "false_tokens"})
_BOOL_FIELDS = frozenset({"enum_ignore_case"})


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Validated, immutable settings consumed by ``optresult.parsing``."""

    #: Case-insensitive spellings accepted as ``True`` by ``parse_bool``.
    true_tokens: tuple[str, ...] = Field(default=("true",), min_length=1)
    #: Case-insensitive spellings accepted as ``False`` by ``parse_bool``.
    false_tokens: tuple[str, ...] = Field(default=("false",), min_length=1)
    enum_ignore_case: bool = False
    thousands_separator: str = Field(default=",", max_length=1)
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("true_tokens", "false_tokens", mode="before")
    @classmethod
    def normalize_tokens(cls, v: Any) -> Any:
        """Accept a comma-separated string or any iterable; lower-case and trim."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple, set, frozenset)):
            tokens = [str(t).strip().lower() for t in v]
            return tuple(t for t in tokens if t)
        return v

    @model_validator(mode="after")
    def validate_disjoint(self) -> Settings:
        """Reject ambiguous token sets and separators."""
        overlap = set(self.true_tokens) & set(self.false_tokens)
        if overlap:
            raise ValueError(
                f"true_tokens and false_tokens overlap: {sorted(overlap)}"
            )
        if self.thousands_separator == self.decimal_separator:
            raise ValueError("thousands_separator must differ from decimal_separator")
        return self


# --- Loaders ---


def load_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read ``OPTRESULT_*`` variables into a plain dict.

    Unknown keys are kept so that validation can reject them with a clear
    message instead of silently ignoring typos.
    """
    source = os.environ if environ is None else environ
    config: dict[str, Any] = {}
    for key, value in source.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in _BOOL_FIELDS:
            config[field_name] = _coerce_bool(value)
        elif field_name in _LIST_FIELDS:
            config[field_name] = value.split(",")
        else:
            config[field_name] = value
    return config


_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Resolution ---


def resolve_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    use_dotenv: bool = False,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from defaults, environment and overrides.

    Args:
        overrides: Programmatic values; highest precedence.
        use_dotenv: Load a ``.env`` file (once per process) before reading
            the environment.
        environ: Environment mapping to read instead of ``os.environ``.

    Returns:
        A validated, frozen ``Settings`` instance.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    if use_dotenv:
        _load_dotenv_once()

    merged: dict[str, Any] = {**load_env(environ), **(overrides or {})}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg") or "invalid value"
        # Remove "Value error, " prefix if present (Pydantic standard wrapper)
        if msg.startswith("Value error, "):
            msg = msg[13:]
        where = f" ({loc})" if loc else ""
        raise ConfigurationError(
            f"Settings validation failed{where}: {msg}",
            hint=f"Check {ENV_PREFIX}* environment variables and overrides.",
        ) from e

    log.debug("Resolved optresult settings: %r", settings)
    return settings


@cache
def default_settings() -> Settings:
    """Return the process-wide settings resolved from defaults and environment.

    Invalid environment values are logged and replaced by the built-in
    defaults; only explicit ``resolve_settings`` / ``settings_scope`` calls
    raise ``ConfigurationError``.
    """
    try:
        return resolve_settings()
    except ConfigurationError as e:
        log.warning("Ignoring invalid %s* environment: %s", ENV_PREFIX, e)
        return Settings()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "optresult_settings", default=None
)


def current_settings() -> Settings:
    """Return the settings active in this context."""
    ambient = _AMBIENT.get()
    return ambient if ambient is not None else default_settings()


@contextmanager
def settings_scope(
    settings: Settings | None = None, **overrides: Any
) -> Generator[Settings]:
    """Temporarily replace the ambient settings.

    Overrides are layered on top of the currently active settings, so nested
    scopes compose. The change is confined to the current context (thread or
    task).

    Raises:
        ConfigurationError: If the overrides fail validation.
    """
    base = settings if settings is not None else current_settings()
    if overrides:
        try:
            scoped = Settings.model_validate({**base.model_dump(), **overrides})
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings override: {e.errors()[0].get('msg')}",
                hint="Check the keyword arguments passed to settings_scope().",
            ) from e
    else:
        scoped = base

    token = _AMBIENT.set(scoped)
    try:
        yield scoped
    finally:
        _AMBIENT.reset(token)
