import random

import pytest

from linspell.lookup import lookup
from linspell.models import Dictionary, SuggestItem


@pytest.fixture
def pets() -> Dictionary:
    return Dictionary({"cat": 10, "bat": 5, "cot": 2})


def _rows(items):
    return [(s.term, s.distance, s.count) for s in items]


def test_ranks_by_distance_then_count(pets):
    out = lookup(pets, "cat", 1, top_results_limit=3)
    assert _rows(out) == [("cat", 0, 10), ("bat", 1, 5), ("cot", 1, 2)]


def test_exhaustive_scan_gives_the_same_ranking(pets):
    out = lookup(pets, "cat", 1, top_results_limit=3, verbose=1)
    assert _rows(out) == [("cat", 0, 10), ("bat", 1, 5), ("cot", 1, 2)]


def test_zero_bound_without_exact_match_is_empty(pets):
    assert lookup(pets, "cab", 0) == []


def test_zero_bound_with_exact_match(pets):
    assert lookup(pets, "bat", 0) == [SuggestItem("bat", 0, 5)]


def test_input_is_normalized(pets):
    out = lookup(pets, "  CAT ", 1, top_results_limit=1)
    assert out == [SuggestItem("cat", 0, 10)]


def test_exact_hit_alone_fills_a_one_item_budget(pets):
    assert lookup(pets, "cot", 2, top_results_limit=1) == [SuggestItem("cot", 0, 2)]
    assert lookup(pets, "cot", 2, top_results_limit=1, verbose=1) == [SuggestItem("cot", 0, 2)]


def test_truncates_to_limit(pets):
    out = lookup(pets, "cxt", 1, top_results_limit=2)
    assert _rows(out) == [("cat", 1, 10), ("cot", 1, 2)]


def test_ties_are_broken_by_term():
    d = Dictionary({"bog": 4, "dog": 4, "fog": 4, "hog": 4})
    out = lookup(d, "xog", 1, top_results_limit=2)
    assert [s.term for s in out] == ["bog", "dog"]


def test_zero_limit_and_empty_dictionary_give_nothing(pets):
    assert lookup(pets, "cat", 2, top_results_limit=0) == []
    assert lookup(Dictionary({}), "cat", 2) == []


def test_maxlength_caps_terms():
    d = Dictionary({"cat": 5, "cats": 30})
    assert [s.term for s in lookup(d, "cat", 1, maxlength=3)] == ["cat"]
    assert [s.term for s in lookup(d, "cat", 1, maxlength=0)] == ["cat", "cats"]


def test_word_far_longer_than_any_term():
    d = Dictionary({"ab": 1})
    assert lookup(d, "abcdefgh", 2) == []


def test_invalid_arguments():
    d = Dictionary({"ab": 1})
    with pytest.raises(ValueError):
        lookup(d, "ab", -1)
    with pytest.raises(ValueError):
        lookup(d, "ab", 1, top_results_limit=-1)


def test_repeated_lookup_is_identical(pets):
    first = lookup(pets, "bot", 2, top_results_limit=3)
    second = lookup(pets, "bot", 2, top_results_limit=3)
    assert first == second
    assert first is not second


def test_lookup_does_not_touch_dictionary(pets):
    before = dict(pets.counts)
    lookup(pets, "cta", 2, top_results_limit=10)
    assert dict(pets.counts) == before


def test_pruned_scan_matches_exhaustive_scan():
    rnd = random.Random(42)
    words = {}
    for _ in range(300):
        w = "".join(rnd.choice("abcd") for _ in range(rnd.randint(1, 6)))
        words[w] = rnd.choice([1, 2, 3, 5, 8, 100])   # many equal counts on purpose
    d = Dictionary(words)
    queries = ["".join(rnd.choice("abcde") for _ in range(rnd.randint(0, 7))) for _ in range(60)]
    for q in queries:
        for bound in (0, 1, 2, 3):
            for limit in (1, 2, 3, 10):
                pruned = lookup(d, q, bound, top_results_limit=limit, verbose=0)
                full = lookup(d, q, bound, top_results_limit=limit, verbose=1)
                assert pruned == full, (q, bound, limit)
