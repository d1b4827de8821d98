"""Canonical shared error types.

This module defines the error taxonomy and the structured shape used when a
failure has to be reported as data instead of (or alongside) an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level error categories shared across package boundaries."""

    UNSPECIFIED = "unspecified"
    VALIDATION = "validation"
    CAPABILITY = "capability"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object attached to raised errors and reports."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
