"""Text rendering collaborator for displayable models."""

from .contracts import Displayable, is_displayable, require_displayable
from .output import Rendered
from .primitives import ForEach, Stack, Text
from .renderer import Renderer

__all__ = [
    "Displayable",
    "ForEach",
    "Rendered",
    "Renderer",
    "Stack",
    "Text",
    "is_displayable",
    "require_displayable",
]
