# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.capability import Capability, compose
from ..core.observable import ObservableList
from ..sync.subscription import SyncSubscription
from ..sync.translate import passes_filter

__all__ = ("Subsettable", "Synced")


class Synced(Capability):
    """A derived list created by :meth:`Subsettable.subset`.

    It follows its master one way until :meth:`unsync` is called.
    Disposing it unsyncs first.
    """

    provides = ("unsync", "get_master")
    wraps = ("dispose",)

    _sync_subscription: SyncSubscription | None = None

    def _sync_with(
        self,
        master: ObservableList,
        predicate: Callable[[Any], bool] | None = None,
    ) -> None:
        self.unsync()
        self._sync_subscription = SyncSubscription(master, self, predicate).attach()

    def get_master(self) -> ObservableList | None:
        """Return the master this list follows, or ``None`` once unsynced."""
        sub = self._sync_subscription
        return sub.master if sub is not None else None

    def unsync(self):
        """Stop following the master. Safe to call repeatedly."""
        sub = self._sync_subscription
        if sub is None:
            return self
        self._sync_subscription = None
        sub.detach()
        return self

    def dispose(self) -> None:
        self.unsync()
        super().dispose()


class Subsettable(Capability):
    """Lets a list spawn derived lists that track it."""

    provides = ("subset",)

    def subset(self, predicate: Callable[[Any], bool] | None = None):
        """Return a new list holding the elements that pass ``predicate``.

        The result is a distinct list of this list's family (same backend,
        and for sorted lists the same ordering) that keeps following
        this list's adds, removes and reorders until it is unsynced.

        Args:
            predicate: Filter for elements; ``None`` copies everything.
                With a filter, ``None`` elements count as gaps: they are
                left out and never passed to it.
        """
        if not isinstance(self, ObservableList):
            raise TypeError(
                f"subset() needs an ObservableList master, got {type(self).__name__}"
            )
        contents = [e for e in self.to_list() if passes_filter(predicate, e)]

        derived_cls = compose(type(self), Synced)
        derived = derived_cls(contents, **self._construction_kwargs())
        derived._sync_with(self, predicate)
        return derived
