"""Observable holders and the view models built on them."""

from .published import Published, Subscription
from .view_models import ContainerViewModel, ListViewModel, containers_view, list_view

__all__ = [
    "ContainerViewModel",
    "ListViewModel",
    "Published",
    "Subscription",
    "containers_view",
    "list_view",
]
