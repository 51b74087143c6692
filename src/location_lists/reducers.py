from collections import Counter
from typing import Iterable, Sequence

import numpy as np

from .errors import LengthMismatchError


def distance_sum(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Sum of |l - r| over both lists after sorting each one independently.
    The inputs are not modified. Object arrays keep Python ints, so
    neither the differences nor the total can overflow.
    """
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right))

    sorted_left = np.sort(np.asarray(left, dtype=object))
    sorted_right = np.sort(np.asarray(right, dtype=object))
    return int(np.abs(sorted_left - sorted_right).sum())


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each left value times the number of times it appears in `right`."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)
