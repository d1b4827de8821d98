"""Factory helpers for building ``ErrorDetail`` values per category."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def validation_error(
    message: str,
    *,
    code: str = codes.VALIDATION_ERROR,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a validation-category error."""
    return _detail(ErrorCategory.VALIDATION, code, message, metadata)


def capability_error(
    message: str,
    *,
    code: str = codes.CAPABILITY_CONTRACT_VIOLATION,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create an error for a value that does not meet a type bound."""
    return _detail(ErrorCategory.CAPABILITY, code, message, metadata)


def not_found_error(
    message: str,
    *,
    code: str = codes.NOT_FOUND,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    return _detail(ErrorCategory.NOT_FOUND, code, message, metadata)


def internal_error(
    message: str,
    *,
    code: str = codes.INTERNAL_ERROR,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    return _detail(ErrorCategory.INTERNAL, code, message, metadata)


def _detail(
    category: ErrorCategory,
    code: str,
    message: str,
    metadata: Mapping[str, str] | None,
) -> ErrorDetail:
    # None of the in-process failures succeed on retry.
    return ErrorDetail(
        code=code,
        message=message,
        category=category,
        retryable=False,
        metadata=dict(metadata or {}),
    )
