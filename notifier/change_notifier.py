from __future__ import annotations
import itertools
import logging
import threading
import weakref
from collections import deque
from typing import Callable, Deque, Dict, Generic, List, Tuple, TypeVar

from .change_events import ChangeRecord, Subscription
from .metrics import (
    ACTIVE_SUBSCRIPTIONS, CALLBACK_ERRORS_TOTAL, CHANGES_TOTAL, DELIVERIES_TOTAL,
)

V = TypeVar("V")


def _untrack(name: str, tracked: List[int]) -> None:
    # notifier collected with subscriptions still registered
    if tracked[0]:
        ACTIVE_SUBSCRIPTIONS.labels(attribute=name).dec(tracked[0])
        tracked[0] = 0


class ChangeNotifier(Generic[V]):
    """
    Holds one observable value and the callbacks interested in it.

    Delivery is synchronous and follows registration order. Each pass works on
    a snapshot of the subscriptions taken when it starts: callbacks added
    during a pass miss that event, callbacks cancelled during a pass still get it.

    A set_value() issued by a callback is queued and applied once the running
    pass has finished, so every callback sees `record.new_value == value`.
    """

    def __init__(self, initial: V, name: str = "value") -> None:
        self.name = name
        self._value = initial
        self._ids = itertools.count(1)
        self._subscriptions: Dict[int, Subscription[V]] = {}
        self._pending: Deque[V] = deque()
        self._delivering = False
        # re-entrant: callbacks run with the lock held and may call back in
        self._lock = threading.RLock()

        # share of the active-subscriptions gauge owned by this notifier
        self._tracked = [0]
        self._finalizer = weakref.finalize(self, _untrack, name, self._tracked)
        self._finalizer.atexit = False

    @property
    def value(self) -> V:
        with self._lock:
            return self._value

    @property
    def subscriptions(self) -> Tuple[Subscription[V], ...]:
        with self._lock:
            return tuple(self._subscriptions.values())

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self, callback: Callable[[ChangeRecord[V]], None]) -> Subscription[V]:
        with self._lock:
            sub = Subscription(id=next(self._ids), callback=callback, owner=self)
            self._subscriptions[sub.id] = sub
            self._tracked[0] += 1
            ACTIVE_SUBSCRIPTIONS.labels(attribute=self.name).inc()
        logging.debug("[notifier] %s: subscription #%d added", self.name, sub.id)
        return sub

    def unsubscribe(self, handle: Subscription[V]) -> None:
        with self._lock:
            if self._subscriptions.get(handle.id) is not handle:
                return
            del self._subscriptions[handle.id]
            handle.active = False
            self._tracked[0] -= 1
            ACTIVE_SUBSCRIPTIONS.labels(attribute=self.name).dec()
        logging.debug("[notifier] %s: subscription #%d cancelled", self.name, handle.id)

    def set_value(self, new_value: V) -> None:
        with self._lock:
            if self._delivering:
                self._pending.append(new_value)
                logging.debug("[notifier] %s: %r queued behind running pass", self.name, new_value)
                return

            self._delivering = True
            try:
                self._apply(new_value)
                while self._pending:
                    self._apply(self._pending.popleft())
            finally:
                self._delivering = False

    def _apply(self, new_value: V) -> None:
        old_value = self._value
        self._value = new_value
        if old_value == new_value:
            return

        record = ChangeRecord(old_value=old_value, new_value=new_value)
        snapshot = tuple(self._subscriptions.values())
        CHANGES_TOTAL.labels(attribute=self.name).inc()
        logging.debug(
            "[notifier] %s: %r -> %r, delivering to %d subscriber(s)",
            self.name, old_value, new_value, len(snapshot),
        )

        for sub in snapshot:
            DELIVERIES_TOTAL.labels(attribute=self.name).inc()
            try:
                sub.callback(record)
            except Exception:
                # one broken observer must not starve the rest
                CALLBACK_ERRORS_TOTAL.labels(attribute=self.name).inc()
                logging.exception(
                    "[notifier] %s: subscription #%d callback failed", self.name, sub.id
                )

    def close(self) -> None:
        """Cancel every subscription; used when the owning subject goes away."""
        for sub in self.subscriptions:
            self.unsubscribe(sub)
