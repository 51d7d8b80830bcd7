import random
from decimal import Decimal
from fractions import Fraction

import pytest

from monoiter.errors import InvalidWindowSize
from monoiter.minmax import MinMax, sliding_minmax


def test_sliding_minmax_matches_brute_force():
    rng = random.Random(7)
    for _ in range(30):
        seq = [rng.uniform(-1, 1) for _ in range(rng.randint(1, 30))]
        for k in range(1, len(seq) + 1):
            expected = [
                MinMax(min(seq[i : i + k]), max(seq[i : i + k]))
                for i in range(len(seq) - k + 1)
            ]
            assert list(sliding_minmax(seq, k)) == expected


def test_ptp():
    assert MinMax(1, 9).ptp == 8
    assert MinMax(Decimal("1.5"), Decimal("4")).ptp == Decimal("2.5")
    assert MinMax(Fraction(1, 3), Fraction(1, 2)).ptp == Fraction(1, 6)


def test_sliding_minmax_is_lazy_over_iterators():
    windows = sliding_minmax(iter([3, 1, 4, 1, 5, 9, 2, 6]), 4)
    assert next(windows) == MinMax(1, 4)
    assert [window.ptp for window in windows] == [4, 8, 8, 7]


def test_sliding_minmax_rejects_bad_window():
    with pytest.raises(InvalidWindowSize):
        _ = sliding_minmax([1, 2, 3], 4)
