# Copyright (c) 2025, synclist contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for subset mode (synclist/capabilities/subset.py)."""

import logging

import pytest

from synclist import ObservableList, SortedList, Subsettable, SyncList, compose
from synclist.capabilities import Synced


def is_even(n):
    return n % 2 == 0


@pytest.fixture
def master(make_list):
    return make_list([1, 2, 3, 4, 5], cls=SyncList)


class TestUnfiltered:
    def test_returns_distinct_copy(self, master):
        subset = master.subset()
        assert subset is not master
        assert subset.to_list() is not master.to_list()
        assert subset.to_list() == [1, 2, 3, 4, 5]
        assert subset.length == 5

    def test_same_family(self, master):
        subset = master.subset()
        assert isinstance(subset, type(master))
        assert isinstance(subset, Synced)
        assert subset.backend is master.backend

    def test_follows_append(self, master):
        subset = master.subset()
        master.append(6)
        assert subset.to_list() == [1, 2, 3, 4, 5, 6]

    def test_follows_splice_removal(self, master):
        subset = master.subset()
        master.append(6)
        master.splice_at(1, 1)
        assert subset.to_list() == [1, 3, 4, 5, 6]

    def test_follows_adds(self, master):
        subset = master.subset()
        master.append(6)
        master.insert_front(0)
        master.splice_at(1, 0, 1)
        assert subset.to_list() == [0, 1, 1, 2, 3, 4, 5, 6]

    def test_follows_removes(self, master):
        subset = master.subset()
        master.remove_last()
        master.remove_first()
        master.splice_at(1, 1)
        assert subset.to_list() == [2, 4]

    def test_follows_multi_element_splice(self, master):
        subset = master.subset()
        master.splice_at(1, 3, "a", "b")
        assert master.to_list() == [1, "a", "b", 5]
        assert subset.to_list() == [1, "a", "b", 5]

    def test_multi_removal_splice_with_duplicates(self, make_list):
        master = make_list(["a", "b", "x", "c", "x", "d"], cls=SyncList)
        subset = master.subset()
        master.splice_at(0, 3)
        assert subset.to_list() == ["c", "x", "d"]

    def test_follows_set_at(self, master):
        subset = master.subset()
        master.set_at(2, "x")
        master.set_at(7, "y")
        assert subset.to_list() == master.to_list()

    def test_follows_sort_and_reverse(self, master):
        master.to_list()[:] = [5, 2, 3, 1, 4]
        subset = master.subset()
        master.sort()
        assert subset.to_list() == [1, 2, 3, 4, 5]
        master.reverse()
        assert subset.to_list() == [5, 4, 3, 2, 1]

    def test_sort_keeps_derived_container(self, master):
        subset = master.subset()
        arr = subset.to_list()
        master.sort(lambda a, b: b - a)
        assert subset.to_list() is arr
        assert arr == [5, 4, 3, 2, 1]

    def test_derived_changes_do_not_reach_master(self, master):
        subset = master.subset()
        subset.append(99)
        subset.remove_first()
        assert master.to_list() == [1, 2, 3, 4, 5]


class TestFiltered:
    def test_initial_contents(self, master):
        subset = master.subset(is_even)
        assert subset.to_list() == [2, 4]

    def test_only_passing_adds(self, master):
        subset = master.subset(is_even)
        master.append(6, 7, 8)
        assert subset.to_list() == [2, 4, 6, 8]

    def test_insert_in_the_middle_keeps_relative_order(self, master):
        subset = master.subset(is_even)
        master.splice_at(3, 0, 10)
        master.insert_front(0)
        assert master.to_list() == [0, 1, 2, 3, 10, 4, 5]
        assert subset.to_list() == [0, 2, 10, 4]

    def test_removes(self, master):
        subset = master.subset(is_even)
        master.splice_at(1, 3)
        assert subset.to_list() == []
        master.append(2, 4)
        master.remove_last()
        assert subset.to_list() == [2]

    def test_removing_rejected_elements_is_ignored(self, master, emitter):
        subset = master.subset(is_even)
        master.remove_first()
        master.remove_last()
        assert subset.to_list() == [2, 4]

    def test_removal_of_duplicate_value(self, make_list):
        master = make_list([2, 1, 2], cls=SyncList)
        subset = master.subset(is_even)
        master.remove_last()
        assert subset.to_list() == [2]
        master.remove_first()
        assert subset.to_list() == []

    def test_multi_removal_splice_with_duplicates(self, make_list):
        master = make_list([0, 2, 3, 5, 0, 9, 8, 8, 2], cls=SyncList)
        subset = master.subset(lambda x: x % 3 != 0)
        assert subset.to_list() == [2, 5, 8, 8, 2]

        master.splice_at(-3, 3, 1)

        assert master.to_list() == [0, 2, 3, 5, 0, 9, 1]
        assert subset.to_list() == [2, 5, 1]

    def test_set_at_past_end_skips_gap(self, make_list, listen):
        master = make_list([1, 2], cls=SyncList)
        subset = master.subset(is_even)
        rec = listen(subset)

        master.set_at(4, 6)
        assert master.to_list() == [1, 2, None, None, 6]
        assert subset.to_list() == [2, 6]
        assert [(e.name, e.element) for e in rec.events] == [("add", 6)]

        master.append(8)
        master.set_at(2, 4)
        assert subset.to_list() == [2, 4, 6, 8]

    def test_gaps_left_out_of_initial_contents(self, make_list):
        master = make_list([2, None, 4], cls=SyncList)
        assert master.subset(is_even).to_list() == [2, 4]
        assert master.subset().to_list() == [2, None, 4]

    def test_sort_refilters_master(self, master):
        subset = master.subset(is_even)
        master.sort(lambda a, b: b - a)
        assert subset.to_list() == [4, 2]

    def test_reverse(self, master):
        subset = master.subset(is_even)
        master.reverse()
        assert subset.to_list() == [4, 2]

    def test_sort_after_reverse_matches_master_order(self, master):
        subset = master.subset(is_even)
        master.append(6, 8)
        master.reverse()
        master.sort()
        assert subset.to_list() == [e for e in master.to_list() if is_even(e)]


class TestLifecycle:
    def test_get_master(self, master):
        assert master.subset().get_master() is master

    def test_unsync_stops_following(self, master, emitter):
        subset = master.subset()
        subset.unsync()
        master.append(6)
        master.sort()
        assert subset.to_list() == [1, 2, 3, 4, 5]
        assert emitter.listener_count(master) == 0
        assert subset.get_master() is None

    def test_unsync_twice_is_noop(self, master):
        subset = master.subset()
        assert subset.unsync() is subset
        assert subset.unsync() is subset

    def test_unsync_removes_only_own_handlers(self, master, emitter):
        first = master.subset()
        second = master.subset(is_even)
        assert emitter.listener_count(master) == 6
        first.unsync()
        assert emitter.listener_count(master) == 3
        master.append(6)
        assert second.to_list() == [2, 4, 6]

    def test_dispose_unsyncs(self, master, emitter):
        subset = master.subset()
        subset.dispose()
        assert emitter.listener_count(master) == 0
        master.append(6)

    def test_derived_events_are_emitted(self, master, listen):
        subset = master.subset(is_even)
        rec = listen(subset)
        master.append(5, 6)
        assert [(e.name, e.element, e.index) for e in rec.events] == [("add", 6, 2)]

    def test_subset_of_subset(self, master):
        evens = master.subset(is_even)
        big_evens = evens.subset(lambda n: n > 2)
        master.append(6)
        assert big_evens.to_list() == [4, 6]

    def test_skipped_events_logged(self, master, caplog):
        caplog.set_level(logging.DEBUG, logger="synclist")
        master.subset(is_even)
        master.append(7)
        assert "filtered" in caplog.text


class TestFamilies:
    def test_requires_subsettable(self, make_list):
        assert not hasattr(make_list([1]), "subset")

    def test_plain_composition(self, make_list):
        Cls = compose(ObservableList, Subsettable)
        subset = make_list([1, 2], cls=Cls).subset()
        assert type(subset) is compose(Cls, Synced)

    def test_sorted_master_passes_comparator(self, make_list):
        by_len = lambda a, b: len(a) - len(b)  # noqa: E731
        Cls = compose(SortedList, Subsettable)
        master = make_list(["ccc", "a"], cls=Cls, comparator=by_len)
        subset = master.subset()
        assert subset.comparator is by_len
        master.append("bb")
        assert subset.to_list() == ["a", "bb", "ccc"]
