"""Bounded generic views over displayable content."""

from packages.generics_core.rendering import Displayable, is_displayable, require_displayable

from .view import DEFAULT_LABEL, GenericView, make_view

__all__ = [
    "DEFAULT_LABEL",
    "Displayable",
    "GenericView",
    "is_displayable",
    "make_view",
    "require_displayable",
]
