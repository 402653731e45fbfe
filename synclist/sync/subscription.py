# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..core.events import ADD, REMOVE, SORT
from .translate import apply_mutation, translate_event

if TYPE_CHECKING:
    from ..core.observable import ObservableList

__all__ = ("SyncSubscription",)

logger = logging.getLogger(__name__)


class SyncSubscription:
    """One live master/derived pairing.

    Holds the three handlers subscribed on the master's backend so exactly
    those can be removed again. Only the master's events are subscribed to;
    mutations of the derived list never feed back into the pairing.

    A master keeps its subscribed handlers (and through them the derived
    list) alive until :meth:`detach` is called.

    Attributes:
        master (ObservableList): The observed list.
        derived (ObservableList): The list kept in sync.
        predicate (Callable | None): Filter for master elements; ``None``
            mirrors everything.
        handlers (dict[str, Callable]): Event name to handler.
    """

    def __init__(
        self,
        master: ObservableList,
        derived: ObservableList,
        predicate: Callable[[Any], bool] | None = None,
    ) -> None:
        self.master = master
        self.derived = derived
        self.predicate = predicate
        self.handlers: dict[str, Callable[[Any], None]] = {
            ADD: self._on_master_add,
            REMOVE: self._on_master_remove,
            SORT: self._on_master_sort,
        }
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> SyncSubscription:
        if self._attached:
            return self
        backend = self.master.backend
        for name, handler in self.handlers.items():
            backend.call("subscribe", self.master, name, handler)
        self._attached = True
        logger.debug(
            "%s attached to master %s",
            type(self.derived).__name__,
            type(self.master).__name__,
        )
        return self

    def detach(self) -> SyncSubscription:
        if not self._attached:
            return self
        backend = self.master.backend
        for name, handler in self.handlers.items():
            backend.call("unsubscribe", self.master, name, handler)
        self._attached = False
        logger.debug(
            "%s detached from master %s",
            type(self.derived).__name__,
            type(self.master).__name__,
        )
        return self

    def _on_master_add(self, event) -> None:
        self._react(event)

    def _on_master_remove(self, event) -> None:
        self._react(event)

    def _on_master_sort(self, event) -> None:
        self._react(event)

    def _react(self, event) -> None:
        mutation = translate_event(
            event,
            master=self.master.to_list(),
            derived=self.derived.to_list(),
            predicate=self.predicate,
        )
        apply_mutation(self.derived, mutation)
