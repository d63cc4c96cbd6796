# ============================================================
# ============== ITERATIVE PARTITION SORT ====================
# ============================================================
#
# Same contract as every SuperSorter-style generator:
#   * mutate `arr` in place
#   * yield (arr, [i, j]) right after each swap of positions i and j
#
# A consumer that mirrors every yielded pair onto its own list of slots
# ends up holding the sorted order, without ever looking at `arr`.
# Self swaps (i == j) are yielded too so the consumer can highlight them.


def swap(arr, i, j):
    arr[i], arr[j] = arr[j], arr[i]


def _belongs_before(value, pivot, descending):
    # Non-strict on purpose: values equal to the pivot cluster next to it.
    return value >= pivot if descending else value <= pivot


def partition(arr, low, high, descending=False):
    """
    Partition arr[low..high] around the value at the middle index.

    Yields every swap it performs and returns the final pivot index
    (read it with ``p = yield from partition(...)``).
    """
    middle = low + (high - low) // 2
    pivot = arr[middle]

    swap(arr, middle, high)
    yield arr, [middle, high]

    i = low
    for j in range(low, high):
        if _belongs_before(arr[j], pivot, descending):
            swap(arr, i, j)
            yield arr, [i, j]
            i += 1

    swap(arr, i, high)
    yield arr, [i, high]
    return i


def iter_quick_sort(arr, descending=False):
    """Non-recursive quicksort driven by an explicit stack of (low, high) ranges."""
    high = len(arr) - 1
    if high <= 0:
        return

    stack = [(0, high)]
    while stack:
        low, high = stack.pop()
        p = yield from partition(arr, low, high, descending)

        if p - 1 > low:
            stack.append((low, p - 1))
        if p + 1 < high:
            stack.append((p + 1, high))


def quick_sort(arr, descending=False, on_swap=None):
    """Sort `arr` in place. `on_swap(i, j)` is called after every swap."""
    for _, (i, j) in iter_quick_sort(arr, descending):
        if on_swap is not None:
            on_swap(i, j)
