# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import CapabilityConflictError, ConfigurationError, SyncListError
from .capabilities import (
    Listenable,
    Sorted,
    SortedList,
    Subsettable,
    Synced,
    SyncList,
    Watchable,
)
from .config import settings
from .core import (
    AddEvent,
    Capability,
    ChangeEvent,
    Emitter,
    EventBackend,
    ObservableList,
    RemoveEvent,
    ReorderEvent,
    ReorderKind,
    compose,
)
from .sync import SyncSubscription, translate_event

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "__version__",
    "settings",
    "SyncListError",
    "ConfigurationError",
    "CapabilityConflictError",
    "AddEvent",
    "RemoveEvent",
    "ReorderEvent",
    "ReorderKind",
    "ChangeEvent",
    "EventBackend",
    "Emitter",
    "Capability",
    "compose",
    "ObservableList",
    "Listenable",
    "Sorted",
    "Subsettable",
    "Synced",
    "Watchable",
    "SortedList",
    "SyncList",
    "SyncSubscription",
    "translate_event",
)
