"""Public shared error API for generic container packages."""

from . import codes
from .exceptions import CapabilityContractError
from .factories import (
    capability_error,
    internal_error,
    not_found_error,
    validation_error,
)
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "CapabilityContractError",
    "ErrorCategory",
    "ErrorDetail",
    "capability_error",
    "codes",
    "exception_to_error",
    "internal_error",
    "not_found_error",
    "validation_error",
]
