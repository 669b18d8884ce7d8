"""Single-threaded event primitives.

Listeners run synchronously on the emitting thread, in subscription
order. A listener that raises is logged and skipped; the remaining
listeners still receive the value.
"""

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Subscription:
    """Handle returned by ``subscribe``; cancelling it detaches the listener."""

    def __init__(self, detach: Callable[[], None]) -> None:
        self._detach: Callable[[], None] | None = detach

    @property
    def active(self) -> bool:
        return self._detach is not None

    def cancel(self) -> None:
        """Detach the listener. Safe to call more than once."""
        if self._detach is not None:
            detach, self._detach = self._detach, None
            detach()


class Signal(Generic[T]):
    """A multicast event source without memory."""

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Subscription:
        """Register a listener for future values."""
        self._listeners.append(listener)
        return Subscription(lambda: self._remove(listener))

    def emit(self, value: T) -> None:
        """Deliver a value to every current listener."""
        # Snapshot so listeners may (un)subscribe while being notified
        for listener in list(self._listeners):
            self._deliver(listener, value)

    def _deliver(self, listener: Listener[T], value: T) -> None:
        try:
            listener(value)
        except Exception:
            logger.exception(f"Listener {listener!r} failed")

    def _remove(self, listener: Listener[T]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass  # Already removed


class ReplaySignal(Signal[T]):
    """A multicast event source that replays its latest value.

    New listeners immediately receive the most recent value, if any, so a
    late subscriber never has to wait for (or cause) a fresh emission.
    """

    def __init__(self) -> None:
        super().__init__()
        self._latest: T | None = None
        self._has_value = False

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def latest(self) -> T | None:
        return self._latest

    def subscribe(self, listener: Listener[T]) -> Subscription:
        subscription = super().subscribe(listener)
        if self._has_value:
            self._deliver(listener, self._latest)
        return subscription

    def emit(self, value: T) -> None:
        self._latest = value
        self._has_value = True
        super().emit(value)
