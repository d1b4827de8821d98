"""Typed generic container holding an optional payload."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from packages.generics_shared.logging import fields, get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class GenericContainer(BaseModel, Generic[T]):
    """Immutable holder of an optional payload of type ``T``.

    One definition serves every payload type. Parametrize the class
    (``GenericContainer[int]``) to have the payload validated against ``T``
    in strict mode, so a payload is never coerced into another type. The bare
    class accepts any payload.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        arbitrary_types_allowed=True,
    )

    payload: T | None = None

    @property
    def has_payload(self) -> bool:
        """Return ``True`` when a payload is present."""
        return self.payload is not None

    def cleared(self) -> GenericContainer[T]:
        """Return a new container of the same ``T`` with no payload.

        The receiver is never modified and its payload is not inspected.
        """
        logger.debug(
            "clearing generic container",
            extra={"fields": {fields.PAYLOAD_TYPE: type(self).__name__}},
        )
        return type(self)(payload=None)
