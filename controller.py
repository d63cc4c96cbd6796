import logging
import re
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from handles import HandleList
from sequence_gen import generate_numbers, is_low_value
from settings import LOW_VALUE_LIMIT, MAX_COUNT, MIN_COUNT, SWAP_DELAY

logger = logging.getLogger(__name__)

SCREEN_INTRO = "intro"
SCREEN_SORT  = "sort"

_COUNT_RE = re.compile(r"[+-]?\d+")


# ============================================================
# ========================= ERRORS ===========================
# ============================================================

class InputError(Exception):
    """Base class for everything the UI reports back to the user."""


class ParseError(InputError):
    def __init__(self, raw):
        super().__init__("Invalid input. Please enter a valid number.")
        self.raw = raw


class RangeError(InputError):
    def __init__(self, count):
        super().__init__(f"Please enter a number between {MIN_COUNT} and {MAX_COUNT}.")
        self.count = count


class SelectionRangeError(InputError):
    def __init__(self, value):
        super().__init__(f"Please select a value smaller or equal to {LOW_VALUE_LIMIT}.")
        self.value = value


class BusyError(InputError):
    def __init__(self, action):
        super().__init__(f"Cannot {action} while sorting.")
        self.action = action


def parse_count(raw: str) -> int:
    if not isinstance(raw, str) or not _COUNT_RE.fullmatch(raw.strip()):
        raise ParseError(raw)
    count = int(raw.strip())
    if count < MIN_COUNT or count > MAX_COUNT:
        raise RangeError(count)
    return count


# ============================================================
# ======================= CONTROLLER =========================
# ============================================================

class SortController:
    """
    Owns the sequence, the handles and the sort direction.

    All methods are called from the UI thread. The only other thread is the
    single sort worker, which is the sole writer to handle values while a
    sort is in flight; every other mutating request is rejected with
    BusyError until the sort's future completes.
    """

    def __init__(self, swap_delay=SWAP_DELAY, rng=None):
        self.swap_delay = swap_delay
        self.rng        = rng
        self.count      = None
        self.handles    = None
        self.descending = True
        self.screen     = SCREEN_INTRO

        self._lock     = threading.Lock()
        self._future   = None
        self._stop     = threading.Event()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sorter")

    @property
    def is_sorting(self) -> bool:
        with self._lock:
            return self._future is not None and not self._future.done()

    def _check_idle(self, action):
        if self.is_sorting:
            logger.warning("Rejected %s: sort in progress", action)
            raise BusyError(action)

    def _populate(self):
        values = generate_numbers(self.count, self.rng)
        self.handles = HandleList.from_values(values)
        logger.info("Generated %d numbers", self.count)
        return self.handles

    def submit_count(self, raw: str) -> int:
        self._check_idle("generate")
        count = parse_count(raw)
        self.count = count
        self.descending = True
        self._populate()
        self.screen = SCREEN_SORT
        return count

    def request_sort(self) -> Future:
        """
        Flip the direction, then sort on the worker thread.

        The flip happens here, before dispatch, so the running task always
        sees the new direction. The returned future resolves to the number
        of swaps performed.
        """
        with self._lock:
            if self._future is not None and not self._future.done():
                logger.warning("Rejected sort: sort in progress")
                raise BusyError("sort")

            self.descending = not self.descending
            if not self.handles:
                done = Future()
                done.set_result(0)
                self._future = done
                return done

            self._future = self._executor.submit(
                self._run_sort, self.handles, self.descending)
            return self._future

    def _run_sort(self, handles, descending):
        order = "descending" if descending else "ascending"
        logger.info("Sorting %d numbers %s", len(handles), order)
        try:
            swaps = handles.sort(descending, self.swap_delay, self._stop)
        except Exception:
            logger.exception("Sort failed")
            raise
        logger.info("Sort finished after %d swaps", swaps)
        return swaps

    def request_reset(self):
        self._check_idle("reset")
        self.descending = True
        self.handles = None
        self.screen = SCREEN_INTRO
        logger.info("Reset to intro screen")

    def select_element(self, position: int) -> HandleList:
        self._check_idle("regenerate")
        if not 0 <= position < len(self.handles):
            raise IndexError(f"Position {position} out of range")
        value = self.handles[position].value
        if not is_low_value(value):
            raise SelectionRangeError(value)
        logger.info("Low value %d selected at %d, regenerating", value, position)
        return self._populate()

    def shutdown(self):
        """Let a running sort finish unpaced, then stop the worker."""
        self._stop.set()
        self._executor.shutdown(wait=True)
