"""Sort engine: active (field, direction) state and the comparator sort.

One `Sorter` belongs to one table view. The view forwards header clicks to
`toggle_field`, restores externally held state with `set_field`, reads
`get_state` to draw header indicators and calls `sort` right before
rendering rows. Every applied mutation is delivered to subscribers as a
`StateChange` so the view knows to re-render.

Null semantics follow SQL ``ORDER BY ... NULLS FIRST|LAST``: values a
field comparator cannot order are grouped first or last regardless of the
sort direction, and direction is applied only to ordered pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import cmp_to_key
from threading import RLock
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Type, TypeVar

from .errors import ComparatorContractError, SortConfigError
from .fields import default_field
from .notifier import StateNotifier, Subscription
from .ordering import Ordering
from .sort_by import Direction, NullHandling, SortBy

__all__ = [
    "SortState",
    "StateChange",
    "SorterConfig",
    "Sorter",
    "sort_items",
]

_logger = logging.getLogger(__name__)

F = TypeVar("F")
T = TypeVar("T")


@dataclass(frozen=True)
class SortState(Generic[F]):
    field: F
    direction: Direction

    def __iter__(self) -> Iterator[Any]:
        # Allows ``field, direction = sorter.get_state()``
        yield self.field
        yield self.direction


@dataclass(frozen=True)
class StateChange(Generic[F]):
    previous: SortState[F]
    current: SortState[F]

    @property
    def changed(self) -> bool:
        return self.previous != self.current


@dataclass(frozen=True)
class SorterConfig(Generic[F]):
    """Optional initial state, consumed once when a Sorter is built.

    Usage:
        sorter = (
            SorterConfig()
            .with_field(PersonField.AGE)
            .with_direction(Direction.DESCENDING)
            .build(PersonField)
        )
    """

    field: Optional[F] = None
    direction: Optional[Direction] = None

    def with_field(self, field: F) -> "SorterConfig[F]":
        return replace(self, field=field)

    def with_direction(self, direction: Direction) -> "SorterConfig[F]":
        return replace(self, direction=direction)

    def build(
        self, field_type: Type[F], *, notifier: Optional[StateNotifier] = None
    ) -> "Sorter[F]":
        return Sorter(field_type, self, notifier=notifier)


def sort_items(field: Any, direction: Direction, nulls: NullHandling, items: List[T]) -> List[T]:
    """Stable in-place sort of `items` by `field`; returns `items`.

    Raises ComparatorContractError if ``field.partial_cmp_by`` returns None
    for a pair where neither value is null. `items` is only written once the
    sort has succeeded, so on error it keeps its original order.
    """
    descending = direction is Direction.DESCENDING
    null_first = nulls is NullHandling.FIRST

    def compare(a: T, b: T) -> int:
        partial = field.partial_cmp_by(a, b)
        if partial is not None:
            ordering = Ordering.of(partial)
            # Reverse only ordered pairs so null placement is unaffected
            return -ordering if descending else ordering
        a_is_null = field.partial_cmp_by(a, a) is None
        b_is_null = field.partial_cmp_by(b, b) is None
        if a_is_null and b_is_null:
            return Ordering.EQUAL
        if a_is_null:
            return Ordering.LESS if null_first else Ordering.GREATER
        if b_is_null:
            return Ordering.GREATER if null_first else Ordering.LESS
        raise ComparatorContractError(field, a, b)

    if len(items) > 1:
        items[:] = sorted(items, key=cmp_to_key(compare))
    return items


class Sorter(Generic[F]):
    """Owns the sort state of one sortable view.

    Invariant: the active direction is always legal for the active field's
    descriptor. Unsortable fields are never activated by toggle/set.
    """

    def __init__(
        self,
        field_type: Type[F],
        config: Optional[SorterConfig[F]] = None,
        *,
        notifier: Optional[StateNotifier] = None,
    ) -> None:
        self._field_type = field_type
        self._lock = RLock()
        self._notifier = notifier if notifier is not None else StateNotifier()
        self._state: SortState[F] = self._initial_state(config or SorterConfig())

    def _initial_state(self, config: SorterConfig[F]) -> SortState[F]:
        field = default_field(self._field_type)
        if config.field is not None:
            self._check_member(config.field)
            if config.field.sort_by() is None:
                _logger.warning(
                    "Configured sort field %r is unsortable; using default %r",
                    config.field,
                    field,
                )
            else:
                field = config.field
        # An unsortable default still needs a direction to report
        sort_by = field.sort_by() or SortBy.default()
        if config.direction is None:
            direction = sort_by.direction()
        else:
            direction = sort_by.ensure_direction(config.direction)
        return SortState(field, direction)

    def _check_member(self, field: Any) -> None:
        if not isinstance(field, self._field_type):
            raise SortConfigError(f"{field!r} is not a member of {self._field_type.__name__}")

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    @property
    def field_type(self) -> Type[F]:
        return self._field_type

    @property
    def notifier(self) -> StateNotifier:
        return self._notifier

    def get_state(self) -> SortState[F]:
        with self._lock:
            return self._state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def toggle_field(self, field: F) -> bool:
        """Activate `field` as a header click would.

        Re-clicking the active reversible field inverts the direction;
        switching fields starts at the new field's initial direction; fixed
        fields always use their one direction. Unsortable fields are ignored.
        Returns True when the request was applied.
        Raises SortConfigError if `field` is not a member of the field type.
        """
        self._check_member(field)
        sort_by = field.sort_by()
        if sort_by is None:
            _logger.debug("Ignoring toggle of unsortable field %r", field)
            return False
        with self._lock:
            previous = self._state
            if sort_by.is_fixed():
                direction = sort_by.direction()
            elif previous.field == field:
                direction = previous.direction.invert()
            else:
                direction = sort_by.direction()
            self._state = SortState(field, direction)
            current = self._state
        _logger.debug("Sort toggled: %r %s -> %r %s", *previous, *current)
        self._notify(previous, current)
        return True

    def set_field(self, field: F, direction: Direction) -> bool:
        """Absolutely set the state, e.g. when restoring it from a URL.

        Idempotent. A direction a fixed field does not allow is clamped to
        its fixed direction. Unsortable fields are ignored.
        Raises SortConfigError if `field` is not a member of the field type.
        """
        self._check_member(field)
        sort_by = field.sort_by()
        if sort_by is None:
            _logger.debug("Ignoring set of unsortable field %r", field)
            return False
        allowed = sort_by.ensure_direction(direction)
        if allowed is not direction:
            _logger.debug("Clamped %s to %s for fixed field %r", direction, allowed, field)
        with self._lock:
            previous = self._state
            self._state = SortState(field, allowed)
            current = self._state
        self._notify(previous, current)
        return True

    def _notify(self, previous: SortState[F], current: SortState[F]) -> None:
        self._notifier.publish(StateChange(previous, current))

    def subscribe(
        self, callback: Callable[[StateChange[F]], None], *, once: bool = False
    ) -> Subscription:
        """Register `callback` to receive a StateChange after each applied mutation."""
        return self._notifier.subscribe(callback, once=once)

    def unsubscribe(self, sub: Subscription) -> None:
        self._notifier.unsubscribe(sub)

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------
    def sort(self, items: List[T]) -> List[T]:
        """Sort `items` in place by the current state and return it.

        On ComparatorContractError `items` is left unchanged.
        """
        field, direction = self.get_state()
        return sort_items(field, direction, field.null_handling(), items)

    def sorted(self, items: Iterable[T]) -> List[T]:
        """Return a new list with `items` ordered by the current state."""
        return self.sort(list(items))
