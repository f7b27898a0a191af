"""Contracts implemented by a consumer's field enum.

A table declares one ``enum.Enum`` per row type, one member per column.
Each member describes how it may be sorted (`Sortable`) and how two rows
compare on it (`PartialOrdBy`). `SortableField` bundles sensible defaults:

    class PersonField(SortableField, Enum):
        NAME = "name"
        AGE = "age"

        def partial_cmp_by(self, a, b):
            return partial_cmp(getattr(a, self.value), getattr(b, self.value))
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Protocol, Type, TypeVar, runtime_checkable

from .ordering import Ordering
from .sort_by import NullHandling, SortBy

__all__ = ["Sortable", "PartialOrdBy", "SortableField", "default_field"]

F = TypeVar("F")


@runtime_checkable
class Sortable(Protocol):
    def sort_by(self) -> Optional[SortBy]: ...  # pragma: no cover - structural

    def null_handling(self) -> NullHandling: ...  # pragma: no cover - structural


@runtime_checkable
class PartialOrdBy(Protocol):
    def partial_cmp_by(self, a: Any, b: Any) -> Optional[Ordering]: ...  # pragma: no cover


class SortableField:
    """Mixin for field enums: reversible ascending, nulls last.

    Subclasses must override `partial_cmp_by`; the mixin has no way to
    know how rows are compared.
    """

    def sort_by(self) -> Optional[SortBy]:
        return SortBy.default()

    def null_handling(self) -> NullHandling:
        return NullHandling.default()

    def partial_cmp_by(self, a: Any, b: Any) -> Optional[Ordering]:
        raise NotImplementedError(f"{type(self).__name__} must implement partial_cmp_by")


def default_field(field_type: Type[F]) -> F:
    """Resolve the initial field of a field enum.

    Uses ``field_type.default()`` when the enum defines it, otherwise the
    first declared member.
    """
    factory = getattr(field_type, "default", None)
    if callable(factory):
        return factory()
    if isinstance(field_type, type) and issubclass(field_type, Enum):
        try:
            return next(iter(field_type))
        except StopIteration:
            raise ValueError(f"{field_type.__name__} declares no fields") from None
    raise TypeError(f"Cannot resolve a default field for {field_type!r}")
