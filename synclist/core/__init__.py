# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from .backend import OPERATIONS, Emitter, EventBackend
from .capability import Capability, capabilities_of, compose
from .events import (
    ADD,
    EVENT_NAMES,
    REMOVE,
    SORT,
    AddEvent,
    ChangeEvent,
    RemoveEvent,
    ReorderEvent,
    ReorderKind,
)
from .observable import ObservableList

__all__ = (
    "ADD",
    "REMOVE",
    "SORT",
    "EVENT_NAMES",
    "OPERATIONS",
    "AddEvent",
    "RemoveEvent",
    "ReorderEvent",
    "ReorderKind",
    "ChangeEvent",
    "EventBackend",
    "Emitter",
    "Capability",
    "compose",
    "capabilities_of",
    "ObservableList",
)
