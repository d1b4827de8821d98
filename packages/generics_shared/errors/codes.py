"""Shared error code constants.

These constants are stable machine-readable identifiers. Component-specific
codes should extend this set locally rather than growing the shared list.
"""

# Validation
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Capability / type bounds
CAPABILITY_CONTRACT_VIOLATION = "CAPABILITY_CONTRACT_VIOLATION"

# Not found
NOT_FOUND = "NOT_FOUND"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
