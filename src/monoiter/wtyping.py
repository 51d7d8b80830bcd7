import typing as tp
from collections.abc import Callable


@tp.runtime_checkable
class SupportsLT(tp.Protocol):
    def __lt__(self, other: tp.Any, /) -> bool: ...  # pyright: ignore[reportAny]  # noqa: ANN401


@tp.runtime_checkable
class SupportsGT(tp.Protocol):
    def __gt__(self, other: tp.Any, /) -> bool: ...  # pyright: ignore[reportAny]  # noqa: ANN401


class SupportsSub(tp.Protocol):
    def __sub__(self, other: tp.Self) -> tp.Self: ...


type Comparable = SupportsLT | SupportsGT
type Comparator[T] = Callable[[T, T], bool]
"""`comparator(a, b)` is True when `a` is strictly more extreme than `b`.

Must be a strict weak ordering and must not change during a traversal;
violations are not detected and silently break the monotonic invariants.
"""
type Key[T] = Callable[[T], Comparable]
