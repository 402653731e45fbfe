# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from .subscription import SyncSubscription
from .translate import (
    Delete,
    DerivedMutation,
    Insert,
    Rebuild,
    Reverse,
    Skip,
    apply_mutation,
    derived_index,
    passes_filter,
    translate_event,
)

__all__ = (
    "SyncSubscription",
    "Insert",
    "Delete",
    "Reverse",
    "Rebuild",
    "Skip",
    "DerivedMutation",
    "derived_index",
    "passes_filter",
    "translate_event",
    "apply_mutation",
)
