"""Capability contract for values the renderer can compose."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from packages.generics_shared.errors import CapabilityContractError, capability_error
from packages.generics_shared.logging import fields, get_logger

from .output import Rendered

logger = get_logger(__name__)

TValue = TypeVar("TValue")


@runtime_checkable
class Displayable(Protocol):
    """A value that knows how to render itself."""

    def render(self) -> Rendered:
        """Return this value's rendered lines."""
        ...


def is_displayable(value: object) -> bool:
    """Return ``True`` when ``value`` implements ``Displayable``."""
    return isinstance(value, Displayable)


def require_displayable(value: TValue, *, field_name: str) -> TValue:
    """Return ``value`` unchanged or raise ``CapabilityContractError``.

    Plain values such as ``str`` must be wrapped in ``Text`` before they can be
    composed.
    """
    if is_displayable(value):
        return value

    type_name = type(value).__name__
    detail = capability_error(
        f"{field_name} must implement Displayable; got {type_name}",
        metadata={fields.FIELD_NAME: field_name, fields.CONTENT_TYPE: type_name},
    )
    logger.warning(
        "rejected non-displayable value",
        extra={
            "fields": {
                fields.FIELD_NAME: field_name,
                fields.CONTENT_TYPE: type_name,
                fields.ERROR_CODE: detail.code,
            }
        },
    )
    raise CapabilityContractError(detail)
