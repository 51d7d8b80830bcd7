"""
Monotonic stack cursor for next-greater / next-smaller element queries.

The stack top is always the element closest to the one arriving. When the
arriving element is more extreme than the top, it is the top's resolver and
the top is popped for good.
"""

from __future__ import annotations

import logging
import typing as tp
from collections.abc import Callable, Iterable, Iterator, Sequence

from monoiter._helpers import as_sequence, check_start, consume
from monoiter.defaults import Decreasing, Ordering
from monoiter.errors import CursorExhausted, EmptyStack, IncompatibleCursorComparison
from monoiter.index import Indexed
from monoiter.operators import as_comparator
from monoiter.wtyping import Comparator

logger = logging.getLogger(__name__)

type ResolveCallback[T] = Callable[[Indexed[T], Indexed[T]], object]
"""Called as `on_resolve(resolved, resolver)` whenever an element is popped."""


class Resolution[T](tp.NamedTuple):
    element: Indexed[T]
    resolver: Indexed[T] | None


@tp.final
class NextExtremeStackCursor[T](Iterator[tuple[T, ...]]):
    """
    Cursor consuming a sequence one element at a time while keeping the
    still unresolved elements on a monotonic stack.

    Args:
        sequence: positionally addressable sequence, read but never copied
        order: Increasing, Decreasing, Custom(predicate) or a bare predicate
        start: position of the next element to consume; len(sequence)
            builds the end cursor
        on_resolve: optional callback receiving (resolved, resolver) pairs

    Example:
        >>> cursor = NextExtremeStackCursor([50, 30, 10, 5, 3, 1, 20])
        >>> cursor.candidates
        ()
        >>> cursor.advance().candidates
        (50,)
        >>> list(cursor)[-1]
        (50, 30, 20)
    """

    def __init__(
        self,
        sequence: Sequence[T],
        order: Ordering[T] = Decreasing,
        *,
        start: int = 0,
        on_resolve: ResolveCallback[T] | None = None,
    ) -> None:
        self._sequence = sequence
        self._position = check_start(start, len(sequence))
        self._comparator: Comparator[T] = as_comparator(order)
        self._stack: list[Indexed[T]] = []
        self._on_resolve = on_resolve
        logger.debug(
            "Stack cursor created at position %d (length=%d)", start, len(sequence)
        )

    def advance(self) -> NextExtremeStackCursor[T]:
        """Consume the next element, popping every element it resolves.

        Returns:
            the cursor itself

        Raises:
            CursorExhausted: every element was already consumed
        """
        if self.at_end:
            raise CursorExhausted(
                f"Cannot advance past the last element at position {self._position}"
            )
        entering = Indexed(self._position, self._sequence[self._position])
        stack = self._stack
        while stack and self._comparator(entering.value, stack[-1].value):
            resolved = stack.pop()
            if self._on_resolve is not None:
                _ = self._on_resolve(resolved, entering)
        stack.append(entering)
        self._position += 1
        if self.at_end:
            logger.debug(
                "Stack cursor exhausted with %d unresolved elements", len(stack)
            )
        return self

    @property
    def sequence(self) -> Sequence[T]:
        return self._sequence

    @property
    def comparator(self) -> Comparator[T]:
        return self._comparator

    @property
    def position(self) -> int:
        """Index of the next element to consume."""
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position == len(self._sequence)

    @property
    def candidates(self) -> tuple[T, ...]:
        """Unresolved elements, bottom of the stack first."""
        return tuple(item.value for item in self._stack)

    @property
    def indexed_candidates(self) -> tuple[Indexed[T], ...]:
        return tuple(self._stack)

    @property
    def top(self) -> Indexed[T]:
        if not self._stack:
            raise EmptyStack("Monotonic stack is empty")
        return self._stack[-1]

    @tp.override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NextExtremeStackCursor):
            return NotImplemented
        other = tp.cast("NextExtremeStackCursor[T]", other)
        if other._sequence is not self._sequence:
            raise IncompatibleCursorComparison(
                "Cannot compare stack cursors over different sequences"
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
        return self.advance().candidates

    def __copy__(self) -> NextExtremeStackCursor[T]:
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._stack = self._stack.copy()
        return clone

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(position={self._position}, "
            + f"candidates={self.candidates!r})"
        )


def make_stack_cursors[T](
    iterable: Iterable[T],
    order: Ordering[T] = Decreasing,
    *,
    on_resolve: ResolveCallback[T] | None = None,
) -> tuple[NextExtremeStackCursor[T], NextExtremeStackCursor[T]]:
    """Build the (begin, end) cursor pair; end sits one past the last element.

    Example:
        >>> resolved = {}
        >>> begin, end = make_stack_cursors(
        ...     [50, 30, 10, 5, 3, 1, 20],
        ...     on_resolve=lambda element, resolver: resolved.update({element.value: resolver.value}),
        ... )
        >>> while begin != end:
        ...     _ = begin.advance()
        >>> resolved
        {1: 20, 3: 20, 5: 20, 10: 20}
        >>> begin.candidates
        (50, 30, 20)
    """
    sequence = as_sequence(iterable)
    begin = NextExtremeStackCursor(sequence, order, on_resolve=on_resolve)
    end = NextExtremeStackCursor(sequence, order, start=len(sequence))
    logger.debug("Built stack cursors over %d elements", len(sequence))
    return begin, end


def next_extremes[T](
    iterable: Iterable[T],
    order: Ordering[T] = Decreasing,
) -> list[Resolution[T]]:
    """For every element, the first later element that is more extreme.

    With Decreasing this is the next greater element of each element,
    with Increasing the next smaller one. Elements never resolved get None.

    Example:
        >>> [
        ...     (res.element.value, res.resolver and res.resolver.value)
        ...     for res in next_extremes([50, 30, 10, 5, 3, 1, 20])
        ... ]
        [(50, None), (30, None), (10, 20), (5, 20), (3, 20), (1, 20), (20, None)]
    """
    sequence = as_sequence(iterable)
    resolvers: list[Indexed[T] | None] = [None] * len(sequence)

    def record(resolved: Indexed[T], resolver: Indexed[T]) -> None:
        resolvers[resolved.idx] = resolver

    consume(NextExtremeStackCursor(sequence, order, on_resolve=record))
    return [
        Resolution(Indexed(idx, value), resolver)
        for idx, (value, resolver) in enumerate(zip(sequence, resolvers, strict=True))
    ]
