"""Convenience constructors for generic containers."""

from __future__ import annotations

from typing import TypeVar

from .container import GenericContainer

T = TypeVar("T")


def make(
    payload: T | None = None,
    *,
    payload_type: type[T] | None = None,
) -> GenericContainer[T]:
    """Build a container around ``payload``.

    ``T`` is taken from ``payload_type`` or, when that is omitted, from the
    payload's own type. The payload is validated strictly against ``T``, so a
    mismatching value raises ``pydantic.ValidationError``. Only a call with
    neither a payload nor a type yields the unparametrized container.
    """
    if payload_type is None:
        if payload is None:
            return GenericContainer(payload=None)
        payload_type = type(payload)
    return GenericContainer[payload_type](payload=payload)  # type: ignore[valid-type]


def empty(payload_type: type[T]) -> GenericContainer[T]:
    """Build a container of ``payload_type`` with no payload."""
    return GenericContainer[payload_type](payload=None)  # type: ignore[valid-type]
