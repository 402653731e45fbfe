# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = (
    "ADD",
    "REMOVE",
    "SORT",
    "EVENT_NAMES",
    "ReorderKind",
    "AddEvent",
    "RemoveEvent",
    "ReorderEvent",
    "ChangeEvent",
)

ADD = "add"
REMOVE = "remove"
SORT = "sort"

EVENT_NAMES = (ADD, REMOVE, SORT)


class ReorderKind(str, Enum):
    """What caused a reorder event.

    Attributes:
        REVERSE: The list was reversed in place.
        SORT: The list was sorted in place.
    """

    REVERSE = "reverse"
    SORT = "sort"


class _ChangeEventBase(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target: Any = Field(
        ...,
        description="The list that emitted the event.",
        repr=False,
    )


class AddEvent(_ChangeEventBase):
    """A single element was added.

    Attributes:
        element (Any): The added element.
        index (int | None): Position of the element after insertion, or
            ``None`` when the emitter could not tell.
    """

    name: Literal["add"] = ADD
    element: Any = None
    index: int | None = None


class RemoveEvent(_ChangeEventBase):
    """A single element was removed.

    Attributes:
        element (Any): The removed element.
        index (int | None): Position of the element before removal, or
            ``None`` when the emitter could not tell.
        offset (int): Removals of the same call reported before this one.
            Once those are applied the element sits at ``index - offset``.
    """

    name: Literal["remove"] = REMOVE
    element: Any = None
    index: int | None = None
    offset: int = 0


class ReorderEvent(_ChangeEventBase):
    """The whole list changed order.

    Reorder events carry no per-element delta; consumers re-read the
    emitting list.
    """

    name: Literal["sort"] = SORT
    kind: ReorderKind = ReorderKind.SORT


ChangeEvent = Annotated[
    Union[AddEvent, RemoveEvent, ReorderEvent],
    Field(discriminator="name"),
]
