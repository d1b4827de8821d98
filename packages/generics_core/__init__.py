"""Generic container and bounded generic view models."""

from .container import GenericContainer, empty, make
from .display import Displayable, GenericView, is_displayable, make_view, require_displayable
from .rendering import ForEach, Rendered, Renderer, Stack, Text

__all__ = [
    "Displayable",
    "ForEach",
    "GenericContainer",
    "GenericView",
    "Rendered",
    "Renderer",
    "Stack",
    "Text",
    "empty",
    "is_displayable",
    "make",
    "make_view",
    "require_displayable",
]
