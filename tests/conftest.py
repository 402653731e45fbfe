# Copyright (c) 2025, synclist contributors
# SPDX-License-Identifier: Apache-2.0

import pytest

from synclist import Emitter, ObservableList


class EventRecorder:
    """Handler that records every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def names(self):
        return [e.name for e in self.events]

    def clear(self):
        self.events.clear()


@pytest.fixture
def emitter():
    """A fresh in-process emitter."""
    return Emitter()


@pytest.fixture
def backend(emitter):
    """Backend bound to the ``emitter`` fixture."""
    return emitter.as_backend()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def make_list(backend):
    """Factory for ObservableLists on the shared backend."""

    def _make(initial=None, cls=ObservableList, **kwargs):
        return cls(initial, backend=backend, **kwargs)

    return _make


@pytest.fixture
def listen(emitter, recorder):
    """Subscribe ``recorder`` to all events of a list and return it."""

    def _listen(target):
        for name in ("add", "remove", "sort"):
            emitter.subscribe(target, name, recorder)
        return recorder

    return _listen
