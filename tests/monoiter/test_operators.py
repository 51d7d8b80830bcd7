from operator import gt, lt

import pytest

from monoiter.defaults import Custom, Decreasing, Direction, Increasing
from monoiter.errors import InvalidOrdering
from monoiter.operators import (
    GreaterByKey,
    LessByKey,
    as_comparator,
    by_key,
    is_direction,
    reverse,
)


def test_as_comparator_directions():
    assert as_comparator(Increasing) is lt
    assert as_comparator(Decreasing) is gt
    assert as_comparator(Direction.Decreasing)(2, 1)
    assert not as_comparator(Direction.Increasing)(2, 1)


def test_as_comparator_custom():
    def longer(a: str, b: str) -> bool:
        return len(a) > len(b)

    assert as_comparator(Custom(longer)) is longer
    assert as_comparator(longer) is longer


@pytest.mark.parametrize("order", [None, 1, "Increasing", (lt,)])
def test_as_comparator_unknown(order: object):
    with pytest.raises(InvalidOrdering, match="Received unknown value for order"):
        _ = as_comparator(order)  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError):
        _ = as_comparator(order)  # pyright: ignore[reportArgumentType]


def test_is_direction():
    assert is_direction(Increasing)
    assert is_direction(Decreasing)
    assert not is_direction(lt)
    assert not is_direction(Custom(lt))


def test_LessByKey():
    assert LessByKey(abs)(-1, 3)
    assert not LessByKey(abs)(-3, 1)
    assert not LessByKey(abs)(-3, 3)

    with pytest.raises(TypeError, match="not supported"):
        _ = LessByKey(lambda value: value)("a", 5)


def test_GreaterByKey():
    assert GreaterByKey(len)("abc", "ab")
    assert not GreaterByKey(len)("a", "ab")
    assert not GreaterByKey(len)("ab", "cd")


def test_by_key():
    pick_latest = as_comparator(by_key(lambda event: event["at"]))
    assert pick_latest({"at": 5}, {"at": 2})
    assert not pick_latest({"at": 2}, {"at": 2})

    pick_earliest = as_comparator(by_key(lambda event: event["at"], Increasing))
    assert pick_earliest({"at": 2}, {"at": 5})


def test_reverse():
    assert reverse(Increasing) is Decreasing
    assert reverse(Decreasing) is Increasing

    shorter = as_comparator(reverse(lambda a, b: len(a) > len(b)))
    assert shorter("a", "ab")
    assert not shorter("ab", "a")

    assert as_comparator(reverse(reverse(Custom(gt))))(2, 1)
