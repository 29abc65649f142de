import random

import pytest

from linspell.distance import damerau_levenshtein, EXCEEDS_BOUND


def _osa(a: str, b: str) -> int:
    """Unbounded optimal-string-alignment distance, full matrix."""
    d = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        d[i][0] = i
    for j in range(len(b) + 1):
        d[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1)
    return d[-1][-1]


def _pairs(n: int = 400, alphabet: str = "abc", max_len: int = 7):
    rnd = random.Random(20180119)
    out = []
    for _ in range(n):
        a = "".join(rnd.choice(alphabet) for _ in range(rnd.randint(0, max_len)))
        b = "".join(rnd.choice(alphabet) for _ in range(rnd.randint(0, max_len)))
        out.append((a, b))
    return out


PAIRS = _pairs()


def test_unbinding_bound_gives_true_distance():
    for a, b in PAIRS:
        m = max(len(a), len(b))
        assert damerau_levenshtein(a, b, m) == _osa(a, b), (a, b)


def test_bounded_result_is_true_distance_or_sentinel():
    for a, b in PAIRS:
        true = _osa(a, b)
        for m in range(0, 6):
            expected = true if true <= m else EXCEEDS_BOUND
            assert damerau_levenshtein(a, b, m) == expected, (a, b, m)


def test_symmetry():
    for a, b in PAIRS:
        for m in (0, 1, 2, 4):
            assert damerau_levenshtein(a, b, m) == damerau_levenshtein(b, a, m), (a, b, m)


@pytest.mark.parametrize("a", ["", "a", "abc", "banana", "ünïcödé"])
def test_identity_is_zero(a):
    for m in (0, 1, 5):
        assert damerau_levenshtein(a, a, m) == 0


def test_smaller_bound_keeps_distances_it_can_hold():
    for a, b in PAIRS:
        for m1 in range(0, 4):
            for m2 in range(m1 + 1, 6):
                d2 = damerau_levenshtein(a, b, m2)
                if 0 <= d2 <= m1:
                    assert damerau_levenshtein(a, b, m1) == d2, (a, b, m1, m2)
