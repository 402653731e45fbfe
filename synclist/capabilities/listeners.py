# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.capability import Capability

__all__ = ("Listenable",)


class Listenable(Capability):
    """Exposes the backend's subscription primitives on the list itself."""

    provides = ("on", "off", "remove_all_listeners")

    def on(self, name: str, handler: Callable[[Any], Any]):
        self.backend.call("subscribe", self, name, handler)
        return self

    def off(self, name: str, handler: Callable[[Any], Any]):
        self.backend.call("unsubscribe", self, name, handler)
        return self

    def remove_all_listeners(self):
        self.backend.call("unsubscribe_all", self)
        return self
