"""Structured logging context carried in a ``contextvars`` variable.

Bound fields are attached to every record emitted through the handler
installed by ``configure_logging``. The stored mapping is never mutated in
place; every change sets a new snapshot.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})

_FIELDS: ContextVar[Mapping[str, str]] = ContextVar("generics_log_fields", default=_EMPTY)


def get_context() -> dict[str, str]:
    """Return a copy of the currently bound fields."""
    return dict(_FIELDS.get())


def bind_context(**values: object) -> Token[Mapping[str, str]]:
    """Bind fields for subsequent log records; ``None`` values are skipped.

    Returns the token that restores the previous snapshot.
    """
    merged = dict(_FIELDS.get())
    merged.update({key: str(value) for key, value in values.items() if value is not None})
    return _FIELDS.set(MappingProxyType(merged))


def clear_context(*keys: str) -> None:
    """Drop ``keys`` from the bound fields, or all of them when none are given."""
    if not keys:
        _FIELDS.set(_EMPTY)
        return
    remaining = {key: value for key, value in _FIELDS.get().items() if key not in keys}
    _FIELDS.set(MappingProxyType(remaining))


@contextmanager
def log_context(values: Mapping[str, object] | None = None, **extra: object) -> Iterator[None]:
    """Bind fields only for the duration of the ``with`` block."""
    token = bind_context(**{**dict(values or {}), **extra})
    try:
        yield
    finally:
        _FIELDS.reset(token)
