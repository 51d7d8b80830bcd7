import logging
from collections import deque
from collections.abc import Iterable, Sequence

from monoiter.errors import InvalidPosition, InvalidWindowSize

logger = logging.getLogger(__name__)

consume = deque[object](maxlen=0).extend


def as_sequence[T](iterable: Iterable[T]) -> Sequence[T]:
    if isinstance(iterable, Sequence):
        return iterable
    materialized = tuple(iterable)
    logger.debug(
        "Materialized %s into a tuple of %d elements",
        type(iterable).__name__,
        len(materialized),
    )
    return materialized


def check_window_size(window_size: int, length: int) -> int:
    if window_size < 1:
        raise InvalidWindowSize(f"Window size must be at least 1, got {window_size=}")
    if window_size > length:
        raise InvalidWindowSize(
            f"Window size exceeds the sequence length: {window_size=}, {length=}"
        )
    return window_size


def check_start(start: int, last: int) -> int:
    if not 0 <= start <= last:
        raise InvalidPosition(f"Start position must lie in [0, {last}], got {start=}")
    return start
