# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

from ..config import settings
from .backend import EventBackend
from .capability import Capability, compose
from .events import AddEvent, ChangeEvent, RemoveEvent, ReorderEvent, ReorderKind

__all__ = ("ObservableList",)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObservableList(Generic[T]):
    """A mutable ordered list that reports every structural change.

    Each mutation first updates the internal list and :attr:`length`, then
    emits one event per element added or removed (``"add"`` / ``"remove"``)
    or a single ``"sort"`` event for reorders, through :attr:`backend`. All
    events are delivered before the mutating call returns.

    Read elements with :meth:`at` rather than mutating :meth:`to_list`
    directly; the returned list is the internal one and changes made to it
    emit nothing.

    Args:
        initial: ``None`` for an empty list, an ``int`` for that many
            ``None`` slots, a ``list`` to adopt as the internal list, or any
            other iterable to copy.
        backend: The event backend. Defaults to the class's
            ``default_backend`` (see :meth:`configure`), or to an
            unconfigured backend that raises ``ConfigurationError`` on
            first use.
    """

    default_backend: ClassVar[EventBackend | None] = None
    __capabilities__: ClassVar[tuple[type[Capability], ...]] = ()

    def __init__(
        self,
        initial: Iterable[T] | int | None = None,
        /,
        *,
        backend: EventBackend | None = None,
    ) -> None:
        if backend is None:
            backend = self.default_backend
        if backend is None:
            backend = EventBackend()
        if not isinstance(backend, EventBackend):
            raise TypeError(
                f"backend must be an EventBackend, got {type(backend).__name__}"
            )
        self.backend = backend

        if initial is None:
            elements = []
        elif isinstance(initial, int):
            elements = [None] * initial
        elif isinstance(initial, list):
            elements = initial
        else:
            elements = list(initial)
        self._elements: list[T] = elements
        self.length = 0
        self._update_length()

    @classmethod
    def configure(cls, backend: EventBackend, *, name: str | None = None):
        """Return a subclass whose instances default to ``backend``.

        ``cls`` itself is left untouched, so different list families can
        use different backends side by side.
        """
        if not isinstance(backend, EventBackend):
            raise TypeError(
                f"backend must be an EventBackend, got {type(backend).__name__}"
            )
        return type(
            name or cls.__name__,
            (cls,),
            {"default_backend": backend, "__module__": cls.__module__},
        )

    @classmethod
    def use(cls, *capabilities: type[Capability], name: str | None = None):
        """Return ``cls`` composed with ``capabilities``.

        Applying a capability the class already has is a no-op.
        """
        return compose(cls, *capabilities, name=name)

    def to_list(self) -> list[T]:
        """Return the internal list (by reference)."""
        return self._elements

    def append(self, *elements: T) -> int:
        """Append ``elements`` and return the new length."""
        arr = self._elements
        current_length = len(arr)
        arr.extend(elements)
        self._update_length()

        for i, element in enumerate(elements):
            self._emit(AddEvent(target=self, element=element, index=current_length + i))

        return self.length

    def remove_last(self) -> T | None:
        """Remove and return the last element, or ``None`` if empty."""
        arr = self._elements
        if not arr:
            return None
        element = arr.pop()
        self._update_length()

        self._emit(RemoveEvent(target=self, element=element, index=len(arr)))

        return element

    def insert_front(self, *elements: T) -> int:
        """Insert ``elements`` at the front, in order, and return the new length."""
        arr = self._elements
        arr[0:0] = elements
        self._update_length()

        for i, element in enumerate(elements):
            self._emit(AddEvent(target=self, element=element, index=i))

        return self.length

    def remove_first(self) -> T | None:
        """Remove and return the first element, or ``None`` if empty."""
        arr = self._elements
        if not arr:
            return None
        element = arr.pop(0)
        self._update_length()

        self._emit(RemoveEvent(target=self, element=element, index=0))

        return element

    def splice_at(self, index: int, how_many: int | None = None, *elements: T) -> list[T]:
        """Remove ``how_many`` elements at ``index`` and insert ``elements`` there.

        ``index`` follows slice semantics (negative counts from the end,
        out-of-range values are clamped). ``how_many=None`` removes
        everything from ``index`` on; larger counts are clamped to what is
        left.

        Returns:
            list: The removed elements.
        """
        arr = self._elements
        start = self._clamp(index)
        if how_many is None:
            stop = len(arr)
        else:
            stop = min(start + max(how_many, 0), len(arr))

        removed = arr[start:stop]
        arr[start:stop] = elements
        self._update_length()

        for i, element in enumerate(removed):
            self._emit(
                RemoveEvent(target=self, element=element, index=start + i, offset=i)
            )
        for i, element in enumerate(elements):
            self._emit(AddEvent(target=self, element=element, index=start + i))

        return removed

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._elements.reverse()
        self._emit(ReorderEvent(target=self, kind=ReorderKind.REVERSE))

    def sort(
        self,
        comparator: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> None:
        """Stable in-place sort.

        Args:
            comparator: Old-style ``cmp(a, b)`` returning a negative number,
                zero or a positive number.
            key: Key function, as for :meth:`list.sort`.
            reverse: Sort descending.

        Raises:
            TypeError: If both ``comparator`` and ``key`` are given.
        """
        if comparator is not None and key is not None:
            raise TypeError("sort() takes a comparator or a key, not both")
        if comparator is not None:
            key = functools.cmp_to_key(comparator)
        self._elements.sort(key=key, reverse=reverse)
        self._emit(ReorderEvent(target=self, kind=ReorderKind.SORT))

    def set_at(self, index: int, element: T) -> None:
        """Overwrite the slot at ``index``.

        An occupied slot reports its previous element removed before the new
        one is reported added. Past the end the gap is filled with ``None``
        and only the element itself is reported added; before the start the
        element is inserted at the front.
        """
        arr = self._elements
        length = len(arr)
        if index < 0:
            index += length

        if 0 <= index < length:
            prev_element = arr[index]
            arr[index] = element
            self._update_length()
            self._emit(RemoveEvent(target=self, element=prev_element, index=index))
            self._emit(AddEvent(target=self, element=element, index=index))
            return

        if index < 0:
            index = 0
            arr.insert(0, element)
        else:
            arr.extend([None] * (index - length))
            arr.append(element)
        self._update_length()
        self._emit(AddEvent(target=self, element=element, index=index))

    def at(self, index: int, default: Any = None) -> T | Any:
        """Return the element at ``index``, or ``default`` when out of range."""
        try:
            return self._elements[index]
        except IndexError:
            return default

    get = at

    def dispose(self) -> None:
        """Release the internal list and drop every listener of this list."""
        self._elements = None
        self.length = 0
        self.backend.call("unsubscribe_all", self)

    def index_of(self, element: Any, start: int = 0) -> int:
        """Return the first index of ``element``, or ``-1``."""
        try:
            return self._elements.index(element, start)
        except ValueError:
            return -1

    def count(self, element: Any) -> int:
        return self._elements.count(element)

    def slice(self, start: int | None = None, stop: int | None = None) -> list[T]:
        return self._elements[start:stop]

    def concat(self, *others: Iterable[T]) -> list[T]:
        result = list(self._elements)
        for other in others:
            if isinstance(other, ObservableList):
                other = other.to_list()
            result.extend(other)
        return result

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [element for element in self._elements if predicate(element)]

    def map(self, fn: Callable[[T], Any]) -> list[Any]:
        return [fn(element) for element in self._elements]

    def copy(self) -> list[T]:
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __getitem__(self, key: int | slice) -> T | list[T]:
        return self._elements[key]

    def __contains__(self, element: Any) -> bool:
        return element in self._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"

    def _construction_kwargs(self) -> dict[str, Any]:
        """Keyword arguments that recreate a list of the same family."""
        return {"backend": self.backend}

    def _replace_all(self, elements: Iterable[T]) -> None:
        """Replace the contents in place and report a sort."""
        self._elements[:] = elements
        self._update_length()
        self._emit(ReorderEvent(target=self, kind=ReorderKind.SORT))

    def _clamp(self, index: int) -> int:
        length = len(self._elements)
        if index < 0:
            return max(length + index, 0)
        return min(index, length)

    def _update_length(self) -> None:
        self.length = len(self._elements)

    def _emit(self, event: ChangeEvent) -> None:
        if settings.LOG_EVENTS:
            logger.debug("%s emits %r", type(self).__name__, event)
        self.backend.call("emit", self, event.name, event)
