import enum
from dataclasses import dataclass
from typing import Literal

from monoiter.wtyping import Comparator


class Direction(enum.Enum):
    """Named monotonic directions.

    Increasing keeps the smaller elements (minima),
    Decreasing keeps the larger elements (maxima).
    """

    Increasing = enum.auto()
    Decreasing = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Increasing: Literal[Direction.Increasing] = Direction.Increasing
Decreasing: Literal[Direction.Decreasing] = Direction.Decreasing


@dataclass(frozen=True, slots=True)
class Custom[T]:
    predicate: Comparator[T]


type Ordering[T] = Direction | Custom[T] | Comparator[T]
