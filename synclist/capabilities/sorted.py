# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from ..config import settings
from ..core.capability import Capability

__all__ = ("Sorted", "natural_order")

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    if a == b:
        return 0
    return 1 if a > b else -1


class Sorted(Capability):
    """Keeps a list ordered by a comparator.

    Every insertion path places each element, one at a time and in argument
    order, after all elements comparing less than or equal to it, so equal
    elements keep their insertion order. Insertions go through a
    single-element ``splice_at`` and therefore report their final index.
    The initial contents are sorted in place at construction.

    :meth:`reverse` flips the direction: afterwards the list is kept in
    descending comparator order until it is reversed again.

    Args:
        comparator: ``cmp(a, b)`` returning a negative number, zero or a
            positive number. Defaults to natural ordering.
        descending: Keep the list in reverse comparator order.
    """

    provides = ("comparator", "descending", "insertion_index")
    wraps = ("append", "insert_front", "splice_at", "set_at", "sort", "reverse")

    comparator: Comparator | None = None
    descending: bool = False

    def __init__(
        self,
        *args: Any,
        comparator: Comparator | None = None,
        descending: bool = False,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.comparator = comparator
        self.descending = descending
        self._elements.sort(key=functools.cmp_to_key(self._order()))

    def insertion_index(self, element: Any) -> int:
        """Return the upper-bound position of ``element`` in the current contents."""
        arr = self._elements
        cmp = self._order()

        if settings.SORTED_SEARCH == "linear":
            for i, other in enumerate(arr):
                if cmp(other, element) > 0:
                    return i
            return len(arr)

        lo, hi = 0, len(arr)
        while lo < hi:
            mid = (lo + hi) // 2
            if cmp(arr[mid], element) > 0:
                hi = mid
            else:
                lo = mid + 1
        return lo

    def append(self, *elements: Any) -> int:
        for element in elements:
            self._insert_sorted(element)
        return self.length

    def insert_front(self, *elements: Any) -> int:
        return self.append(*elements)

    def splice_at(self, index: int, how_many: int | None = None, *elements: Any) -> list:
        removed = super().splice_at(index, how_many)
        for element in elements:
            self._insert_sorted(element)
        return removed

    def set_at(self, index: int, element: Any) -> None:
        length = len(self._elements)
        if index < 0:
            index += length
        if 0 <= index < length:
            super().splice_at(index, 1)
        self._insert_sorted(element)

    def sort(self, comparator: Comparator | None = None, *, key=None, reverse: bool = False) -> None:
        if comparator is None and key is None:
            comparator = self._order()
        super().sort(comparator, key=key, reverse=reverse)

    def reverse(self) -> None:
        self.descending = not self.descending
        super().reverse()

    def _order(self) -> Comparator:
        cmp = self.comparator or natural_order
        if self.descending:
            return lambda a, b: cmp(b, a)
        return cmp

    def _insert_sorted(self, element: Any) -> None:
        super().splice_at(self.insertion_index(element), 0, element)

    def _construction_kwargs(self) -> dict[str, Any]:
        return {
            **super()._construction_kwargs(),
            "comparator": self.comparator,
            "descending": self.descending,
        }
