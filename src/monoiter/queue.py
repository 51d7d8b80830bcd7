"""
Monotonic queue cursor for sliding-window extremum problems.

Every element enters the deque once and leaves it at most once, so a full
traversal of n elements costs O(n) regardless of the window size.
"""

from __future__ import annotations

import logging
import typing as tp
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from monoiter._helpers import as_sequence, check_start, check_window_size, consume
from monoiter.defaults import Decreasing, Ordering
from monoiter.errors import CursorExhausted, IncompatibleCursorComparison
from monoiter.index import Indexed
from monoiter.operators import as_comparator
from monoiter.wtyping import Comparator

logger = logging.getLogger(__name__)


@tp.final
class SlidingWindowExtremumCursor[T](Iterator[tuple[T, ...]]):
    """
    Cursor over the windows of size `window_size` of a sequence, keeping the
    candidate extrema of the current window in a monotonic deque.

    The front of the deque is always the extremum of the current window.
    Equal values are retained in arrival order, so the earliest of several
    equal extrema is reported first.

    Two cursors compare equal when they sit at the same window position;
    this is the loop termination test, not a comparison of contents.

    Args:
        sequence: positionally addressable sequence, read but never copied
        window_size: number of elements per window, 1 <= window_size <= len(sequence)
        order: Increasing, Decreasing, Custom(predicate) or a bare predicate
        start: position of the first window; len(sequence) - window_size + 1
            builds the end cursor

    Raises:
        InvalidWindowSize: window_size is out of range
        InvalidPosition: start is out of range

    Example:
        >>> seq = [1, 3, 6, 2, 5, 1, 7, 5, 3, 9, 12]
        >>> cursor = SlidingWindowExtremumCursor(seq, 4)
        >>> cursor.candidates
        (6, 2)
        >>> cursor.advance().candidates
        (6, 5)
        >>> list(cursor)
        [(6, 5), (6, 5, 1), (7,), (7, 5), (7, 5, 3), (9,), (12,)]
        >>> cursor.at_end
        True
    """

    def __init__(
        self,
        sequence: Sequence[T],
        window_size: int,
        order: Ordering[T] = Decreasing,
        *,
        start: int = 0,
    ) -> None:
        self._sequence = sequence
        self._window_size = check_window_size(window_size, len(sequence))
        self._end = len(sequence) - window_size + 1
        self._position = check_start(start, self._end)
        self._comparator: Comparator[T] = as_comparator(order)
        self._queue: deque[Indexed[T]] = deque()
        if not self.at_end:
            consume(map(self._push, range(start, start + window_size)))
        logger.debug(
            "Window cursor created at position %d (window_size=%d, length=%d)",
            start,
            window_size,
            len(sequence),
        )

    def _push(self, idx: int) -> None:
        value = self._sequence[idx]
        queue = self._queue
        while queue and self._comparator(value, queue[-1].value):
            _ = queue.pop()
        queue.append(Indexed(idx, value))

    def advance(self) -> SlidingWindowExtremumCursor[T]:
        """Slide the window one element forward.

        Returns:
            the cursor itself

        Raises:
            CursorExhausted: the cursor already reached the end
        """
        if self.at_end:
            raise CursorExhausted(
                f"Cannot advance past the last window at position {self._position}"
            )
        self._position += 1
        if self.at_end:
            self._queue.clear()
            logger.debug("Window cursor exhausted after %d windows", self._end)
            return self
        if self._queue[0].idx < self._position:
            _ = self._queue.popleft()
        self._push(self._position + self._window_size - 1)
        return self

    @property
    def sequence(self) -> Sequence[T]:
        return self._sequence

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def comparator(self) -> Comparator[T]:
        return self._comparator

    @property
    def position(self) -> int:
        """Index of the first element of the current window."""
        return self._position

    @property
    def end_position(self) -> int:
        return self._end

    @property
    def at_end(self) -> bool:
        return self._position == self._end

    @property
    def candidates(self) -> tuple[T, ...]:
        """Retained candidates, front (current extremum) first."""
        return tuple(item.value for item in self._queue)

    @property
    def indexed_candidates(self) -> tuple[Indexed[T], ...]:
        return tuple(self._queue)

    @property
    def extremum(self) -> T:
        """Extremum of the current window.

        Example:
            >>> from monoiter import Increasing
            >>> SlidingWindowExtremumCursor([4, 2, 8], 2, Increasing).extremum
            2
        """
        if self.at_end:
            raise CursorExhausted("End cursor has no window")
        return self._queue[0].value

    @property
    def window(self) -> tuple[T, ...]:
        """Elements of the current window; empty at the end."""
        if self.at_end:
            return ()
        return tuple(self._sequence[self._position : self._position + self._window_size])

    @tp.override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlidingWindowExtremumCursor):
            return NotImplemented
        other = tp.cast("SlidingWindowExtremumCursor[T]", other)
        if other._sequence is not self._sequence:
            raise IncompatibleCursorComparison(
                "Cannot compare window cursors over different sequences"
            )
        if other._window_size != self._window_size:
            raise IncompatibleCursorComparison(
                "Cannot compare window cursors with different window sizes: "
                + f"{self._window_size} != {other._window_size}"
            )
        return self._position == other._position

    __hash__: tp.ClassVar[None] = None  # pyright: ignore[reportIncompatibleMethodOverride]

    @tp.override
    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return self

    @tp.override
    def __next__(self) -> tuple[T, ...]:
        if self.at_end:
            raise StopIteration
        candidates = self.candidates
        _ = self.advance()
        return candidates

    def __copy__(self) -> SlidingWindowExtremumCursor[T]:
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._queue = self._queue.copy()
        return clone

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(position={self._position}, "
            + f"window_size={self._window_size}, candidates={self.candidates!r})"
        )


def make_window_cursors[T](
    iterable: Iterable[T],
    window_size: int,
    order: Ordering[T] = Decreasing,
) -> tuple[SlidingWindowExtremumCursor[T], SlidingWindowExtremumCursor[T]]:
    """Build the (begin, end) cursor pair over every window of `iterable`.

    Non-sequence iterables are read once into a tuple shared by both cursors.

    Example:
        >>> begin, end = make_window_cursors([1, 3, 6, 2, 5, 1, 7, 5, 3, 9, 12], 4)
        >>> extrema = []
        >>> while begin != end:
        ...     extrema.append(begin.candidates[0])
        ...     _ = begin.advance()
        >>> extrema
        [6, 6, 6, 7, 7, 7, 9, 12]
    """
    sequence = as_sequence(iterable)
    begin = SlidingWindowExtremumCursor(sequence, window_size, order)
    end = SlidingWindowExtremumCursor(
        sequence, window_size, order, start=begin.end_position
    )
    logger.debug("Built window cursors over %d windows", begin.end_position)
    return begin, end


def sliding_extrema[T](
    iterable: Iterable[T],
    window_size: int,
    order: Ordering[T] = Decreasing,
) -> Iterator[T]:
    """Lazily yield the extremum of every window.

    Arguments are validated eagerly, before the first value is requested.

    Example:
        >>> list(sliding_extrema([1, 3, 6, 2, 5, 1, 7, 5, 3, 9, 12], 4))
        [6, 6, 6, 7, 7, 7, 9, 12]
        >>> from monoiter import Increasing
        >>> list(sliding_extrema([1, 3, 6, 2, 5, 1, 7, 5, 3, 9, 12], 4, Increasing))
        [1, 2, 1, 1, 1, 1, 3, 3]
        >>> sliding_extrema([1, 2], 3)
        Traceback (most recent call last):
            ...
        monoiter.errors.InvalidWindowSize: Window size exceeds the sequence length: window_size=3, length=2
    """
    cursor = SlidingWindowExtremumCursor(as_sequence(iterable), window_size, order)
    return (candidates[0] for candidates in cursor)
