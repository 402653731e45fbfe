# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from ..core.capability import compose
from ..core.observable import ObservableList
from .listeners import Listenable
from .sorted import Sorted, natural_order
from .subset import Subsettable, Synced
from .watch import Watchable

SortedList = compose(ObservableList, Sorted, name="SortedList")
SyncList = compose(ObservableList, Listenable, Subsettable, Watchable, name="SyncList")

__all__ = (
    "Listenable",
    "Sorted",
    "Subsettable",
    "Synced",
    "Watchable",
    "natural_order",
    "SortedList",
    "SyncList",
)
