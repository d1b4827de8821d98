"""Basic displayable building blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from .contracts import Displayable, require_displayable
from .output import Rendered

TItem = TypeVar("TItem")


@dataclass(frozen=True)
class Text:
    """Adapter presenting a plain string as one rendered line."""

    value: str

    def render(self) -> Rendered:
        return Rendered.of(self.value)


@dataclass(frozen=True, init=False)
class Stack:
    """Vertical composition of displayable children."""

    children: tuple[Displayable, ...]

    def __init__(self, children: Iterable[Displayable]) -> None:
        checked = tuple(
            require_displayable(child, field_name=f"children[{index}]")
            for index, child in enumerate(children)
        )
        object.__setattr__(self, "children", checked)

    def render(self) -> Rendered:
        return Rendered.stack(*(child.render() for child in self.children))


@dataclass(frozen=True, init=False)
class ForEach(Generic[TItem]):
    """Render one view per item, built on demand by ``build``."""

    items: tuple[TItem, ...]
    build: Callable[[TItem], Displayable]

    def __init__(
        self, items: Iterable[TItem], build: Callable[[TItem], Displayable]
    ) -> None:
        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "build", build)

    def render(self) -> Rendered:
        views = [
            require_displayable(self.build(item), field_name=f"build(items[{index}])")
            for index, item in enumerate(self.items)
        ]
        return Rendered.stack(*(view.render() for view in views))
