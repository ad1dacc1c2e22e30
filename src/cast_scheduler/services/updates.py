"""Three-way update instructions for partially updated fields.

A partial update has to tell apart "leave the field alone", "clear it" and
"set it to a value". A single nullable argument collapses the first two, so
each optional field is described by one of :class:`Unchanged`, :class:`Clear`
or :class:`Set`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Unchanged:
    """Leave the stored value untouched."""


@dataclass(frozen=True)
class Clear:
    """Reset the stored value to ``None``."""


@dataclass(frozen=True)
class Set(Generic[T]):
    """Replace the stored value with ``value``."""

    value: T


FieldUpdate = Union[Unchanged, Clear, Set[T]]

UNCHANGED = Unchanged()
CLEAR = Clear()


def from_optional(value: T | None) -> Set[T] | Clear:
    """Translate a supplied, possibly-null value into an instruction."""
    return CLEAR if value is None else Set(value)


def apply_update(current: T | None, update: FieldUpdate[T]) -> T | None:
    """Return the value that results from applying ``update`` to ``current``."""
    if isinstance(update, Set):
        return update.value
    if isinstance(update, Clear):
        return None
    return current
