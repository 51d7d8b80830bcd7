"""
Comparator construction and dispatch
"""

from collections.abc import Callable
from operator import gt, lt

from typing_extensions import TypeIs

from monoiter.defaults import Custom, Decreasing, Direction, Increasing, Ordering
from monoiter.errors import InvalidOrdering
from monoiter.wtyping import Comparable, Comparator, Key


def is_direction(obj: object) -> TypeIs[Direction]:
    return isinstance(obj, Direction)


def as_comparator[T](order: Ordering[T]) -> Comparator[T]:
    """Resolve a direction tag, a Custom wrapper or a bare predicate to a comparator.

    Example:
        >>> as_comparator(Decreasing)(3, 2)
        True
        >>> as_comparator(Increasing)(3, 2)
        False
        >>> as_comparator(Custom(lambda a, b: len(a) > len(b)))("abc", "x")
        True
        >>> as_comparator(42)
        Traceback (most recent call last):
            ...
        monoiter.errors.InvalidOrdering: Received unknown value for order: 42
    """
    match order:
        case Direction.Increasing:
            return lt
        case Direction.Decreasing:
            return gt
        case Custom(predicate=predicate):
            return predicate
        case predicate if callable(predicate):
            return predicate
        case unknown:
            raise InvalidOrdering(f"Received unknown value for order: {unknown!r}")


def keyed_factory(
    op: Callable[[Comparable, Comparable], bool],
) -> Callable[[Key[object]], Comparator[object]]:
    def comparator[T](key: Key[T], /) -> Comparator[T]:
        """
        Given a key function, returns a comparator applying `op` to the keys of both operands

        Example:
            >>> by_len = GreaterByKey(len)
            >>> by_len("abc", "de")
            True
            >>> by_len("de", "ab")
            False

        Returns:
            a closure that takes two operands and returns bool
        """

        def wrapper(lhs: T, rhs: T, /) -> bool:
            return op(key(lhs), key(rhs))

        return wrapper

    return comparator


LessByKey = keyed_factory(lt)
GreaterByKey = keyed_factory(gt)


def by_key[T](key: Key[T], direction: Direction = Decreasing) -> Custom[T]:
    """Order elements by `key(element)` in the given direction.

    Example:
        >>> pick_oldest = by_key(lambda person: person[1])
        >>> as_comparator(pick_oldest)(("ann", 41), ("bob", 37))
        True
        >>> as_comparator(by_key(abs, Increasing))(-1, 3)
        True
    """
    match direction:
        case Direction.Increasing:
            return Custom(LessByKey(key))
        case Direction.Decreasing:
            return Custom(GreaterByKey(key))


def reverse[T](order: Ordering[T]) -> Ordering[T]:
    """Ordering that keeps the opposite extremum.

    Example:
        >>> reverse(Increasing)
        <Direction.Decreasing: 2>
        >>> as_comparator(reverse(lambda a, b: a > b))(1, 2)
        True
    """
    if is_direction(order):
        return Decreasing if order is Increasing else Increasing
    comparator = as_comparator(order)
    return Custom(lambda lhs, rhs: comparator(rhs, lhs))
