"""Observable value holder used for the controller's public state."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Observable(Generic[T]):
    """A readable value that notifies subscribers when it changes.

    Setting a value equal to the current one is a no-op, so subscribers only
    hear about real changes.

    Args:
        value: Initial value.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        """The current value."""
        return self._value

    def set(self, value: T) -> None:
        """Store ``value`` and notify subscribers if it differs from the current one."""
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            self._notify(callback, value)

    def subscribe(
        self, callback: Callable[[T], None], *, emit_current: bool = True
    ) -> Callable[[], None]:
        """Register ``callback`` for future changes.

        Args:
            callback: Called with each new value.
            emit_current: Also call it right away with the current value.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)
        if emit_current:
            self._notify(callback, self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        """Drop all subscribers."""
        self._subscribers.clear()

    @staticmethod
    def _notify(callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception:
            logger.exception("Observable subscriber %r failed", callback)
