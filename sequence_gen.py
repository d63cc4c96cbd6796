import logging

import numpy as np

from settings import LOW_VALUE_LIMIT, MAX_VALUE, MIN_VALUE

logger = logging.getLogger(__name__)


def is_low_value(value: int) -> bool:
    return value <= LOW_VALUE_LIMIT


def generate_numbers(count: int, rng: np.random.Generator | None = None) -> list:
    """
    Draw `count` uniform integers in [MIN_VALUE, MAX_VALUE].

    If none of them is a low value, one uniformly chosen position is
    overwritten with a uniform integer in [MIN_VALUE, LOW_VALUE_LIMIT], so
    the user always has something to click. The count is validated by the
    caller.
    """
    if rng is None:
        rng = np.random.default_rng()

    numbers = rng.integers(MIN_VALUE, MAX_VALUE + 1, size=count)
    if not np.any(numbers <= LOW_VALUE_LIMIT):
        pos = int(rng.integers(0, count))
        numbers[pos] = rng.integers(MIN_VALUE, LOW_VALUE_LIMIT + 1)
        logger.debug("No low value drawn, forced one at position %d", pos)

    return numbers.tolist()
