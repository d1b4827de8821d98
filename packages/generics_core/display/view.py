"""Generic view whose content type is bound to ``Displayable``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from packages.generics_core.rendering import Displayable, Rendered, Text, require_displayable

DEFAULT_LABEL = "Generic view"

TContent = TypeVar("TContent", bound=Displayable)


@dataclass(frozen=True)
class GenericView(Generic[TContent]):
    """A label followed by displayable content.

    Content that does not implement ``Displayable`` is rejected with
    ``CapabilityContractError`` during construction; a non-``str`` label is
    rejected with ``TypeError``.
    """

    content: TContent
    label: str = DEFAULT_LABEL

    def __post_init__(self) -> None:
        _require_label(self.label)
        require_displayable(self.content, field_name="content")

    def render(self) -> Rendered:
        """Render the label line, then the content's own lines."""
        return Text(self.label).render().then(self.content.render())


def make_view(label: str, content: TContent) -> GenericView[TContent]:
    """Build a ``GenericView`` after checking ``label`` and ``content``."""
    _require_label(label)
    checked = require_displayable(content, field_name="content")
    return GenericView(content=checked, label=label)


def _require_label(label: object) -> None:
    if not isinstance(label, str):
        raise TypeError(f"label must be str; got {type(label).__name__}")
