"""Change notification for one sorter's state.

A `Sorter` publishes a `StateChange` here after every applied mutation so
the view that owns it can re-render explicitly. There is a single channel:
every subscriber receives every change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, List

__all__ = ["StateNotifier", "Subscription"]

_logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Subscription:
    callback: Callable[[Any], None]
    once: bool = False
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class StateNotifier:
    """Delivers state changes to subscribers in subscription order.

    Callbacks run after the sorter has released its lock and outside this
    notifier's lock, so a callback may read or mutate the sorter. A failing
    callback is logged and recorded in `errors`; later callbacks still run.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: List[Subscription] = []
        self._errors: List[tuple[Any, Exception]] = []

    def subscribe(self, callback: Callable[[Any], None], *, once: bool = False) -> Subscription:
        sub = Subscription(callback, once=once)
        with self._lock:
            self._subs.append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        sub.cancel()
        with self._lock:
            self._subs = [s for s in self._subs if s is not sub]

    def publish(self, change: Any) -> None:
        with self._lock:
            subs = [s for s in self._subs if s.active]
        for sub in subs:
            if sub.once:
                # Retire before calling so a re-entrant publish cannot deliver twice
                self.unsubscribe(sub)
            try:
                sub.callback(change)
            except Exception as exc:  # noqa: BLE001 - isolate subscriber failures
                _logger.exception("Sort state subscriber %r failed", sub.callback)
                with self._lock:
                    self._errors.append((change, exc))

    def subscriber_count(self) -> int:
        with self._lock:
            return sum(1 for s in self._subs if s.active)

    @property
    def errors(self) -> list[tuple[Any, Exception]]:
        with self._lock:
            return list(self._errors)
