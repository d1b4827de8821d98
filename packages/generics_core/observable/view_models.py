"""View models mirroring the generics playground."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from packages.generics_core.container import GenericContainer, make
from packages.generics_core.display import GenericView, make_view
from packages.generics_core.rendering import ForEach, Stack, Text

from .published import Published

DEFAULT_ITEMS = ("one", "Two", "Three", "Four")


class ListViewModel:
    """A published list of strings that can be emptied."""

    def __init__(self, items: Sequence[str] = DEFAULT_ITEMS) -> None:
        self.items: Published[list[str]] = Published(list(items), name="items")

    def remove_all(self) -> None:
        self.items.value = []


class ContainerViewModel:
    """Independent generic containers for ``str``, ``bool`` and ``int``.

    Each container is published separately, so clearing one never notifies
    observers of another.
    """

    def __init__(self) -> None:
        self.string_model: Published[GenericContainer[str]] = Published(
            make("Defined as string now", payload_type=str), name="string"
        )
        self.bool_model: Published[GenericContainer[bool]] = Published(
            make(True, payload_type=bool), name="bool"
        )
        self.int_model: Published[GenericContainer[int]] = Published(
            make(23, payload_type=int), name="int"
        )
        self._models: dict[str, Published[Any]] = {
            model.name: model
            for model in (self.string_model, self.bool_model, self.int_model)
        }

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._models)

    def model(self, name: str) -> Published[Any]:
        """Return the published container registered as ``name``."""
        try:
            return self._models[name]
        except KeyError:
            raise KeyError(f"unknown container '{name}'") from None

    def clear(self, name: str) -> None:
        """Replace one container with its cleared form."""
        published = self.model(name)
        published.value = published.value.cleared()

    def snapshot(self) -> dict[str, Any]:
        """Return the current payload of every container by name."""
        return {name: model.value.payload for name, model in self._models.items()}


def list_view(items: Sequence[str]) -> ForEach[str]:
    """One ``Text`` row per item."""
    return ForEach(items, Text)


def containers_view(snapshot: Mapping[str, Any]) -> GenericView[Stack]:
    """Labelled rows showing each container payload, ``-`` when absent."""
    rows = [
        Text(f"{name}: {'-' if payload is None else payload}")
        for name, payload in snapshot.items()
    ]
    return make_view("Generic containers", Stack(rows))
