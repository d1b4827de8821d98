"""Exception normalization utilities for shared error contracts."""

from __future__ import annotations

from pydantic import ValidationError

from . import codes
from .exceptions import CapabilityContractError
from .factories import internal_error, not_found_error, validation_error
from .types import ErrorDetail


def exception_to_error(exc: Exception) -> ErrorDetail:
    """Normalize a Python exception into a shared ``ErrorDetail``.

    Errors that already carry a structured detail are returned unchanged.
    """
    if isinstance(exc, CapabilityContractError):
        return exc.detail

    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, ValidationError):
        return validation_error(
            _first_validation_message(exc),
            metadata={**metadata, "error_count": str(exc.error_count())},
        )

    if isinstance(exc, ValueError):
        return validation_error(str(exc), code=codes.INVALID_ARGUMENT, metadata=metadata)

    if isinstance(exc, KeyError):
        return not_found_error(str(exc), metadata=metadata)

    return internal_error(
        str(exc) or "unexpected exception",
        code=codes.UNEXPECTED_EXCEPTION,
        metadata=metadata,
    )


def _first_validation_message(error: ValidationError) -> str:
    """Map the first Pydantic failure to a short ``<field>: <msg>`` message."""
    first_error = error.errors()[0]
    location = ".".join(str(part) for part in first_error.get("loc", ()))
    message = str(first_error.get("msg", "invalid value"))
    if not location:
        return message
    return f"{location}: {message}"
