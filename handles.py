import enum
import threading

from sorter import iter_quick_sort


class HandleState(enum.Enum):
    NORMAL  = "normal"
    PIVOT_A = "pivot_a"
    PIVOT_B = "pivot_b"


class Handle:
    """One on-screen slot. Its position in the HandleList is its identity."""
    __slots__ = ('value', 'state')

    def __init__(self, value, state=HandleState.NORMAL):
        self.value = value
        self.state = state

    def __repr__(self):
        return f"Handle({self.value}, {self.state.name})"


class HandleList:
    """
    Ordered, fixed-length list of handles.

    Handles are never moved or replaced; a swap exchanges the values two
    slots display. At most two slots are highlighted at a time: the pair
    touched by the last swap.
    """

    def __init__(self, handles):
        self._handles = list(handles)
        self._lit = []

    @classmethod
    def from_values(cls, values):
        return cls(Handle(v) for v in values)

    def __len__(self):
        return len(self._handles)

    def __getitem__(self, index):
        return self._handles[index]

    def __iter__(self):
        return iter(self._handles)

    def values(self) -> list:
        return [h.value for h in self._handles]

    def clear_highlight(self):
        for h in self._handles:
            h.state = HandleState.NORMAL
        self._lit = []

    def swap(self, i: int, j: int):
        for k in self._lit:
            self._handles[k].state = HandleState.NORMAL

        a, b = self._handles[i], self._handles[j]
        a.value, b.value = b.value, a.value

        # A self swap leaves the value alone but still marks the slot.
        b.state = HandleState.PIVOT_B
        a.state = HandleState.PIVOT_A
        self._lit = [i, j]

    def sort(self, descending: bool, delay: float = 0.0, stop=None) -> int:
        """
        Sort the displayed values in place, one visible swap at a time.

        The sort runs on a private buffer; each swap it reports is mirrored
        onto the handles at the same two positions. Returns the number of
        swaps performed.

        Once `stop` (a threading.Event) is set the remaining swaps run
        without pacing; the final order is the same either way.
        """
        if stop is None:
            stop = threading.Event()
        buf = self.values()
        swaps = 0
        for _, (i, j) in iter_quick_sort(buf, descending):
            self.swap(i, j)
            swaps += 1
            if delay > 0:
                stop.wait(delay)
        self.clear_highlight()
        return swaps
