from collections.abc import Iterable, Iterator
from typing import NamedTuple

from monoiter._helpers import as_sequence
from monoiter.defaults import Decreasing, Increasing
from monoiter.queue import SlidingWindowExtremumCursor
from monoiter.wtyping import Comparable, SupportsSub


class MinMax[T](NamedTuple):
    min: T
    max: T

    @property
    def ptp[TSupportsSub: SupportsSub](self: "MinMax[TSupportsSub]") -> TSupportsSub:
        return self.max - self.min


def sliding_minmax[T: Comparable](
    iterable: Iterable[T], window_size: int
) -> Iterator[MinMax[T]]:
    """Lazily yield both extrema of every window, walking two monotonic deques in lockstep.

    Example:
        >>> windows = sliding_minmax([1, 3, 6, 2, 5, 1, 7], 3)
        >>> [(mm.min, mm.max) for mm in windows]
        [(1, 6), (2, 6), (2, 6), (1, 5), (1, 7)]
        >>> next(sliding_minmax([4, 9, 2], 3)).ptp
        7
    """
    sequence = as_sequence(iterable)
    lows = SlidingWindowExtremumCursor(sequence, window_size, Increasing)
    highs = SlidingWindowExtremumCursor(sequence, window_size, Decreasing)
    return (
        MinMax(low[0], high[0]) for low, high in zip(lows, highs, strict=True)
    )
