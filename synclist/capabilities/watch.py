# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.capability import Capability
from ..core.observable import ObservableList
from ..sync.subscription import SyncSubscription

__all__ = ("Watchable",)


class Watchable(Capability):
    """Lets an existing list mirror another list.

    A list watches at most one master at a time. Watching is one way;
    two lists watching each other recurse without bound.
    """

    provides = ("watch", "unwatch", "watched")
    wraps = ("dispose",)

    _watch_subscription: SyncSubscription | None = None

    @property
    def watched(self) -> ObservableList | None:
        sub = self._watch_subscription
        return sub.master if sub is not None else None

    def watch(self, master: ObservableList):
        """Mirror ``master``, dropping any previous master first.

        Raises:
            TypeError: If ``master`` is not an ``ObservableList``.
            ValueError: If a list is asked to watch itself.
        """
        if not isinstance(master, ObservableList):
            raise TypeError(
                f"watch() needs an ObservableList master, got {type(master).__name__}"
            )
        if master is self:
            raise ValueError("A list cannot watch itself")
        self.unwatch()
        self._watch_subscription = SyncSubscription(master, self).attach()
        return self

    def unwatch(self):
        """Stop mirroring. A no-op when nothing is watched."""
        sub = self._watch_subscription
        if sub is None:
            return self
        self._watch_subscription = None
        sub.detach()
        return self

    def dispose(self) -> None:
        self.unwatch()
        super().dispose()
