"""
Lazy monotonic traversals over ordered sequences.

Example:
    >>> from monoiter import make_window_cursors
    >>> begin, end = make_window_cursors([1, 3, 6, 2, 5, 1, 7, 5, 3, 9, 12], 4)
    >>> [candidates[0] for candidates in begin]
    [6, 6, 6, 7, 7, 7, 9, 12]
    >>> begin == end
    True
"""

import logging

from monoiter.defaults import Custom, Decreasing, Direction, Increasing, Ordering
from monoiter.errors import (
    CursorExhausted,
    EmptyStack,
    IncompatibleCursorComparison,
    InvalidOrdering,
    InvalidPosition,
    InvalidWindowSize,
    MonotonicError,
)
from monoiter.index import Indexed
from monoiter.minmax import MinMax, sliding_minmax
from monoiter.operators import as_comparator, by_key, is_direction, reverse
from monoiter.queue import SlidingWindowExtremumCursor, make_window_cursors, sliding_extrema
from monoiter.stack import (
    NextExtremeStackCursor,
    Resolution,
    make_stack_cursors,
    next_extremes,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CursorExhausted",
    "Custom",
    "Decreasing",
    "Direction",
    "EmptyStack",
    "IncompatibleCursorComparison",
    "Increasing",
    "Indexed",
    "InvalidOrdering",
    "InvalidPosition",
    "InvalidWindowSize",
    "MinMax",
    "MonotonicError",
    "NextExtremeStackCursor",
    "Ordering",
    "Resolution",
    "SlidingWindowExtremumCursor",
    "as_comparator",
    "by_key",
    "is_direction",
    "make_stack_cursors",
    "make_window_cursors",
    "next_extremes",
    "reverse",
    "sliding_extrema",
    "sliding_minmax",
]
