"""Text renderer that draws displayable trees and redraws on change."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from packages.generics_shared.config import RenderSettings
from packages.generics_shared.logging import fields, get_logger

from .contracts import Displayable, require_displayable

if TYPE_CHECKING:
    from packages.generics_core.observable import Published, Subscription

T = TypeVar("T")

logger = get_logger(__name__)


class Renderer:
    """Turn displayable values into text using ``RenderSettings``."""

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self._settings = settings if settings is not None else RenderSettings()

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    def render(self, root: object) -> str:
        """Render ``root`` to text; ``root`` must implement ``Displayable``."""
        view = require_displayable(root, field_name="root")
        output = view.render()
        separator = self._settings.line_separator
        text = separator.join(output.lines)
        if self._settings.trailing_separator and output.lines:
            text += separator
        return text

    def attach(
        self,
        source: Published[T],
        build: Callable[[T], Displayable],
        sink: Callable[[str], None],
    ) -> Subscription:
        """Redraw ``build(value)`` into ``sink`` each time ``source`` publishes.

        Cancel the returned subscription to stop redrawing. If the initial
        draw raises, nothing is subscribed.
        """

        def redraw(value: T) -> None:
            logger.debug(
                "redrawing view",
                extra={"fields": {fields.SOURCE: source.name}},
            )
            sink(self.render(build(value)))

        # No observer is registered until the initial draw succeeds.
        if self._settings.draw_on_attach:
            redraw(source.value)
        return source.subscribe(redraw)
