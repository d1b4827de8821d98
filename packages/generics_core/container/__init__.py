"""Public generic container API."""

from .builders import empty, make
from .container import GenericContainer

__all__ = [
    "GenericContainer",
    "empty",
    "make",
]
