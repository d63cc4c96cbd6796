"""
Tests for the handle list that mirrors sort swaps onto display slots.
"""

import random
import threading
import time

import pytest

from handles import Handle, HandleList, HandleState
from sorter import iter_quick_sort


class TestHandleList:

    def test_from_values(self):
        hl = HandleList.from_values([3, 1, 2])
        assert len(hl) == 3
        assert hl.values() == [3, 1, 2]
        assert all(h.state is HandleState.NORMAL for h in hl)

    def test_swap_moves_values_not_handles(self):
        hl = HandleList.from_values([10, 20, 30])
        first, last = hl[0], hl[2]
        hl.swap(0, 2)
        assert hl[0] is first and hl[2] is last
        assert hl.values() == [30, 20, 10]

    def test_swap_highlights_pair_and_clears_previous(self):
        hl = HandleList.from_values([1, 2, 3, 4])
        hl.swap(0, 1)
        assert hl[0].state is HandleState.PIVOT_A
        assert hl[1].state is HandleState.PIVOT_B
        hl.swap(2, 3)
        assert hl[0].state is HandleState.NORMAL
        assert hl[1].state is HandleState.NORMAL
        assert hl[2].state is HandleState.PIVOT_A
        assert hl[3].state is HandleState.PIVOT_B

    def test_self_swap_keeps_value_but_highlights(self):
        hl = HandleList.from_values([5, 6])
        hl.swap(1, 1)
        assert hl.values() == [5, 6]
        assert hl[1].state is HandleState.PIVOT_A
        assert hl[0].state is HandleState.NORMAL

    def test_clear_highlight(self):
        hl = HandleList.from_values([5, 6])
        hl.swap(0, 1)
        hl.clear_highlight()
        assert all(h.state is HandleState.NORMAL for h in hl)

    @pytest.mark.parametrize("descending, expected", [
        (False, [1, 2, 5, 7, 9]),
        (True,  [9, 7, 5, 2, 1]),
    ])
    def test_sort_known_scenario(self, descending, expected):
        hl = HandleList.from_values([5, 2, 9, 1, 7])
        handles = list(hl)
        hl.sort(descending)
        assert hl.values() == expected
        assert list(hl) == handles
        assert all(h.state is HandleState.NORMAL for h in hl)

    def test_sort_mirrors_every_swap(self):
        rnd = random.Random(11)
        values = [rnd.randint(1, 1000) for _ in range(300)]
        buf = list(values)
        expected_swaps = sum(1 for _ in iter_quick_sort(buf, True))

        hl = HandleList.from_values(values)
        assert hl.sort(True) == expected_swaps
        assert hl.values() == buf == sorted(values, reverse=True)

    @pytest.mark.parametrize("values", [[], [17]])
    def test_sort_trivial(self, values):
        hl = HandleList.from_values(values)
        assert hl.sort(False) == 0
        assert hl.values() == values

    def test_sort_with_delay(self):
        hl = HandleList.from_values([3, 1, 2])
        hl.sort(False, delay=0.001)
        assert hl.values() == [1, 2, 3]

    def test_set_stop_skips_delay_but_still_sorts(self):
        values = list(range(200, 0, -1))
        hl = HandleList.from_values(values)
        stop = threading.Event()
        stop.set()

        start = time.monotonic()
        swaps = hl.sort(False, delay=0.5, stop=stop)
        assert time.monotonic() - start < 2.0
        assert swaps > 0
        assert hl.values() == sorted(values)


def test_handle_repr():
    assert repr(Handle(4)) == "Handle(4, NORMAL)"
