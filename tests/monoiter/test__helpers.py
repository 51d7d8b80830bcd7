import pytest

from monoiter._helpers import as_sequence, check_start, check_window_size, consume
from monoiter.errors import InvalidPosition, InvalidWindowSize


def test_as_sequence_keeps_sequences():
    items = [1, 2, 3]
    assert as_sequence(items) is items
    text = "abc"
    assert as_sequence(text) is text


def test_as_sequence_materializes_iterators():
    assert as_sequence(iter([1, 2, 3])) == (1, 2, 3)
    assert as_sequence(x * x for x in range(3)) == (0, 1, 4)
    assert as_sequence({1: "a"}.keys()) == (1,)


def test_check_window_size():
    assert check_window_size(1, 1) == 1
    assert check_window_size(3, 5) == 3

    with pytest.raises(InvalidWindowSize, match="at least 1"):
        _ = check_window_size(0, 5)
    with pytest.raises(InvalidWindowSize, match="exceeds the sequence length"):
        _ = check_window_size(6, 5)


def test_check_start():
    assert check_start(0, 0) == 0
    assert check_start(4, 4) == 4

    with pytest.raises(InvalidPosition, match=r"\[0, 4\]"):
        _ = check_start(5, 4)
    with pytest.raises(InvalidPosition):
        _ = check_start(-1, 4)


def test_consume():
    seen: list[int] = []
    consume(seen.append(x) for x in range(3))
    assert seen == [0, 1, 2]
