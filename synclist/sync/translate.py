# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Translation of master change events into derived-list mutations.

:func:`translate_event` is pure: it reads the master and derived contents
and returns the mutation that keeps the derived list consistent.
:func:`apply_mutation` performs it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from ..core.events import AddEvent, RemoveEvent, ReorderEvent, ReorderKind

if TYPE_CHECKING:
    from ..core.observable import ObservableList

__all__ = (
    "Insert",
    "Delete",
    "Reverse",
    "Rebuild",
    "Skip",
    "DerivedMutation",
    "derived_index",
    "passes_filter",
    "translate_event",
    "apply_mutation",
)

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert ``element`` at ``index``; ``index=None`` appends."""

    element: Any
    index: int | None


@dataclass(frozen=True, slots=True)
class Delete:
    element: Any
    index: int


@dataclass(frozen=True, slots=True)
class Reverse:
    pass


@dataclass(frozen=True, slots=True)
class Rebuild:
    """Replace the derived contents with ``elements``."""

    elements: list[Any] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Skip:
    reason: str


DerivedMutation = Union[Insert, Delete, Reverse, Rebuild, Skip]


def _same(a: Any, b: Any) -> bool:
    return a is b or a == b


def passes_filter(predicate: Predicate | None, element: Any) -> bool:
    """Return whether a derived list filtered by ``predicate`` holds ``element``.

    ``None`` marks a gap left by ``set_at`` past the end. Filtered lists
    never hold it and ``predicate`` is never called with it.
    """
    if predicate is None:
        return True
    return element is not None and bool(predicate(element))


def derived_index(
    master_index: int | None,
    master: Sequence[Any],
    predicate: Predicate | None = None,
) -> int | None:
    """Map a position in ``master`` to the matching position in the derived list.

    Without a predicate the spaces coincide. With one, the derived position
    is the number of predicate-passing master elements in front of
    ``master_index``.
    """
    if master_index is None:
        return None
    if predicate is None:
        return master_index
    return sum(
        1 for element in master[:master_index] if passes_filter(predicate, element)
    )


def translate_event(
    event: AddEvent | RemoveEvent | ReorderEvent,
    *,
    master: Sequence[Any],
    derived: Sequence[Any],
    predicate: Predicate | None = None,
) -> DerivedMutation:
    """Return the derived mutation equivalent to ``event``.

    Args:
        event: A change event emitted by the master.
        master: The master's contents after the change.
        derived: The derived list's current contents.
        predicate: Filter deciding which master elements the derived list
            holds; ``None`` mirrors everything.

    Raises:
        TypeError: If ``event`` is not a change event.
    """
    match event:
        case AddEvent(element=element, index=index):
            if not passes_filter(predicate, element):
                return Skip("filtered")
            return Insert(element, derived_index(index, master, predicate))

        case RemoveEvent(element=element, index=index, offset=offset):
            if not passes_filter(predicate, element):
                return Skip("filtered")
            position = None if index is None else index - offset
            candidate = derived_index(position, master, predicate)
            if candidate is not None and 0 <= candidate < len(derived):
                if _same(derived[candidate], element):
                    return Delete(element, candidate)
            # no usable position, locate by value
            for i, other in enumerate(derived):
                if _same(other, element):
                    return Delete(element, i)
            return Skip("not found")

        case ReorderEvent(kind=ReorderKind.REVERSE):
            return Reverse()

        case ReorderEvent():
            return Rebuild([e for e in master if passes_filter(predicate, e)])

        case _:
            raise TypeError(f"Unsupported change event: {type(event).__name__}")


def apply_mutation(derived: ObservableList, mutation: DerivedMutation) -> None:
    """Apply ``mutation`` to ``derived`` through its event-emitting methods."""
    match mutation:
        case Insert(element=element, index=index):
            if index is None or index == len(derived):
                derived.append(element)
            elif index > len(derived):
                # master gap from set_at past the end
                derived.set_at(index, element)
            elif index <= 0:
                derived.insert_front(element)
            else:
                derived.splice_at(index, 0, element)

        case Delete(index=index):
            if index == 0:
                derived.remove_first()
            elif index == len(derived) - 1:
                derived.remove_last()
            else:
                derived.splice_at(index, 1)

        case Reverse():
            derived.reverse()

        case Rebuild(elements=elements):
            logger.debug(
                "Re-deriving %s from master (%d elements)",
                type(derived).__name__,
                len(elements),
            )
            derived._replace_all(elements)

        case Skip(reason=reason):
            logger.debug("Skipped master event for %s: %s", type(derived).__name__, reason)

        case _:
            raise TypeError(f"Unsupported mutation: {type(mutation).__name__}")
