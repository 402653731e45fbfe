# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Explicit composition of list behaviors.

A capability is a mixin class. :func:`compose` builds a new subclass of a
list type with the capabilities placed ahead of it in the MRO, so a
capability can both add members (``provides``) and wrap existing ones
through ``super()``. Nothing is patched onto existing classes.
"""

from __future__ import annotations

import functools
import logging
from typing import ClassVar, TypeVar

from .._errors import CapabilityConflictError

__all__ = (
    "Capability",
    "compose",
    "capabilities_of",
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class Capability:
    """Base for mixins composed onto list classes.

    Attributes:
        provides: Public members the capability adds. Composing onto a
            class that already has any of them raises
            :class:`CapabilityConflictError`.
        wraps: Existing members the capability overrides on purpose and
            delegates to through ``super()``.
    """

    provides: ClassVar[tuple[str, ...]] = ()
    wraps: ClassVar[tuple[str, ...]] = ()


def capabilities_of(cls: type) -> tuple[type[Capability], ...]:
    """Return the capabilities already composed into ``cls``."""
    return getattr(cls, "__capabilities__", ())


def compose(base: T, *capabilities: type[Capability], name: str | None = None) -> T:
    """Return a subclass of ``base`` with ``capabilities`` mixed in.

    Capabilities that ``base`` already carries are skipped; when none are
    left ``base`` itself is returned. Composing the same inputs twice
    returns the same class.

    Raises:
        TypeError: If an argument is not a :class:`Capability` subclass.
        CapabilityConflictError: If a provided member already exists on
            ``base`` or is provided by two of the capabilities.
    """
    applied = capabilities_of(base)
    pending: list[type[Capability]] = []
    for cap in capabilities:
        if not (isinstance(cap, type) and issubclass(cap, Capability)):
            raise TypeError(f"Expected a Capability subclass, got {cap!r}")
        if cap in applied or cap in pending:
            continue
        pending.append(cap)
    if not pending:
        return base
    return _compose(base, tuple(pending), name)


@functools.lru_cache(maxsize=None)
def _compose(base: type, pending: tuple[type[Capability], ...], name: str | None) -> type:
    provided: dict[str, type[Capability]] = {}
    for cap in pending:
        for member in cap.provides:
            if hasattr(base, member):
                raise CapabilityConflictError.for_member(member, cap, base)
            if member in provided:
                raise CapabilityConflictError.for_member(member, cap, provided[member])
            provided[member] = cap

    namespace = {
        "__capabilities__": (*capabilities_of(base), *pending),
        "__module__": base.__module__,
        "__qualname__": name or base.__qualname__,
    }
    cls = type(name or base.__name__, (*reversed(pending), base), namespace)
    logger.debug(
        "Composed %s from %s with %s",
        cls.__name__,
        base.__name__,
        ", ".join(cap.__name__ for cap in pending),
    )
    return cls
