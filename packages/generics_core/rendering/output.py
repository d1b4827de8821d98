"""Rendered output value produced by displayable models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rendered:
    """Ordered lines of rendered text."""

    lines: tuple[str, ...] = ()

    @classmethod
    def of(cls, *lines: str) -> Rendered:
        return cls(lines=tuple(lines))

    @classmethod
    def empty(cls) -> Rendered:
        return cls()

    @classmethod
    def stack(cls, *parts: Rendered) -> Rendered:
        """Concatenate ``parts`` top to bottom."""
        lines: list[str] = []
        for part in parts:
            lines.extend(part.lines)
        return cls(lines=tuple(lines))

    def then(self, other: Rendered) -> Rendered:
        """Return these lines followed by ``other``."""
        return Rendered(lines=self.lines + other.lines)
