# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from .._errors import ConfigurationError

__all__ = (
    "OPERATIONS",
    "EventBackend",
    "Emitter",
)

logger = logging.getLogger(__name__)

OPERATIONS = ("emit", "subscribe", "unsubscribe", "unsubscribe_all")

Handler = Callable[[Any], Any]


class EventBackend(BaseModel):
    """The publish/subscribe capability set a list emits through.

    Each operation receives the emitting (or observed) list as its first
    argument, so one backend can serve a whole family of lists:

    - ``emit(target, name, event)``
    - ``subscribe(target, name, handler)``
    - ``unsubscribe(target, name, handler)``
    - ``unsubscribe_all(target)``

    Operations may be left unset. Calling an unset operation through
    :meth:`call` raises :class:`ConfigurationError` immediately.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    emit: Callable[..., Any] | None = None
    subscribe: Callable[..., Any] | None = None
    unsubscribe: Callable[..., Any] | None = None
    unsubscribe_all: Callable[..., Any] | None = None

    def call(self, operation: str, target: Any, *args: Any) -> Any:
        """Invoke ``operation`` on behalf of ``target``.

        Raises:
            ValueError: If ``operation`` is not a backend operation.
            ConfigurationError: If the operation was never configured.
        """
        if operation not in OPERATIONS:
            raise ValueError(
                f"Unknown backend operation {operation!r}, "
                f"expected one of {', '.join(OPERATIONS)}"
            )
        fn = getattr(self, operation)
        if fn is None:
            raise ConfigurationError.missing_operation(operation, target)
        return fn(target, *args)

    def is_configured(self, operation: str | None = None) -> bool:
        if operation is None:
            return all(getattr(self, op) is not None for op in OPERATIONS)
        return getattr(self, operation, None) is not None


class Emitter:
    """Synchronous in-process publish/subscribe registry.

    Handlers are registered per target list and per event name. The same
    handler may be registered several times; each registration is called
    once per emit and ``unsubscribe`` removes exactly one of them. Targets
    are held weakly, so a list that nobody subscribes to is collected
    normally. A master with live sync handlers stays alive until those
    handlers are torn down.

    Handler exceptions propagate to the caller of ``emit``.
    """

    def __init__(self) -> None:
        self._registry: weakref.WeakKeyDictionary[Any, dict[str, list[Handler]]] = (
            weakref.WeakKeyDictionary()
        )

    def emit(self, target: Any, name: str, event: Any) -> None:
        handlers = self._registry.get(target, {}).get(name)
        if not handlers:
            return
        # handlers may unsubscribe while being called
        for handler in list(handlers):
            handler(event)

    def subscribe(self, target: Any, name: str, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        self._registry.setdefault(target, {}).setdefault(name, []).append(handler)

    def unsubscribe(self, target: Any, name: str, handler: Handler) -> None:
        events = self._registry.get(target)
        if not events or name not in events:
            return
        handlers = events[name]
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del events[name]
        if not events:
            del self._registry[target]

    def unsubscribe_all(self, target: Any) -> None:
        removed = self._registry.pop(target, None)
        if removed:
            logger.debug(
                "Removed %d listener(s) from %s",
                sum(len(h) for h in removed.values()),
                type(target).__name__,
            )

    def listener_count(self, target: Any, name: str | None = None) -> int:
        """Count live registrations of ``target``, optionally for one event."""
        events = self._registry.get(target, {})
        if name is not None:
            return len(events.get(name, ()))
        return sum(len(handlers) for handlers in events.values())

    def as_backend(self) -> EventBackend:
        """Return an :class:`EventBackend` bound to this emitter."""
        return EventBackend(
            emit=self.emit,
            subscribe=self.subscribe,
            unsubscribe=self.unsubscribe,
            unsubscribe_all=self.unsubscribe_all,
        )
