"""Observability – Observable, Subscription, ObservableData.

Zero-argument broadcast: ``notify()`` calls every currently subscribed
listener synchronously, in subscription order. Listeners added or removed
during a broadcast take effect on the next one.
"""
from __future__ import annotations

from typing import Callable, Generic, TypeVar

__all__ = ["Listener", "Observable", "ObservableData", "Subscription"]

T = TypeVar("T")

Listener = Callable[[], None]


class Subscription:
    """Detach handle returned by :meth:`Observable.subscribe`."""

    __slots__ = ("_observable", "_listener")

    def __init__(self, observable: "Observable", listener: Listener) -> None:
        self._observable: Observable | None = observable
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._observable is not None

    def unsubscribe(self) -> None:
        if self._observable is not None:
            self._observable.unsubscribe(self._listener)
            self._observable = None

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *_: object) -> None:
        self.unsubscribe()


class Observable:
    """Explicit observer registry."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


class ObservableData(Observable, Generic[T]):
    """Observable holding a current value; every ``set_current`` notifies."""

    def __init__(self, initial: T) -> None:
        super().__init__()
        self._current = initial

    def get_current(self) -> T:
        return self._current

    def set_current(self, value: T) -> None:
        self._current = value
        self.notify()
