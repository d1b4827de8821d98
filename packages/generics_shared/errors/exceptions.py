"""Exception types raised at package boundaries."""

from __future__ import annotations

from .types import ErrorDetail


class CapabilityContractError(TypeError):
    """Raised when a value does not implement a required capability.

    The structured ``detail`` carries a stable code and the offending type so
    callers can report the rejection without parsing the message.
    """

    def __init__(self, detail: ErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail
