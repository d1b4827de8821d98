"""Publish-on-assignment value holder with explicit observer registration."""

from __future__ import annotations

from itertools import count
from typing import Callable, Generic, TypeVar

from packages.generics_shared.logging import fields, get_logger

T = TypeVar("T")

Observer = Callable[[T], None]

logger = get_logger(__name__)


class Subscription:
    """Handle returned by ``Published.subscribe``; cancel to stop updates."""

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Remove the observer. Calling more than once is a no-op."""
        if not self._active:
            return
        self._active = False
        self._cancel()


class Published(Generic[T]):
    """Hold one value and notify observers whenever it is reassigned.

    Observers run synchronously in registration order. Exceptions raised by an
    observer propagate to whoever assigned the value.
    """

    def __init__(self, value: T, *, name: str = "") -> None:
        self._value = value
        self._name = name
        self._observers: dict[int, Observer[T]] = {}
        self._tokens = count()

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        self.notify()

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: Observer[T]) -> Subscription:
        """Register ``observer`` for future notifications."""
        token = next(self._tokens)
        self._observers[token] = observer
        return Subscription(lambda: self._observers.pop(token, None))

    def notify(self) -> None:
        """Publish the current value to every registered observer."""
        observers = list(self._observers.values())
        logger.debug(
            "publishing value",
            extra={
                "fields": {
                    fields.SOURCE: self._name,
                    fields.OBSERVER_COUNT: len(observers),
                }
            },
        )
        for observer in observers:
            observer(self._value)
