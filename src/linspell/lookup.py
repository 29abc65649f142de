from __future__ import annotations
import bisect
from typing import List, Tuple

from .config import EDIT_DISTANCE_MAX, TOP_RESULTS_LIMIT, MAXLENGTH, VERBOSE
from .distance import damerau_levenshtein, EXCEEDS_BOUND
from .models import Dictionary, SuggestItem
from .normalize import normalize_term

# (distance asc, count desc, term asc): a total order, so truncation is deterministic
_Rank = Tuple[int, int, str]


def rank_key(item: SuggestItem) -> _Rank:
    return (item.distance, -item.count, item.term)


def _too_long(term: str, maxlength: int) -> bool:
    return maxlength > 0 and len(term) > maxlength


def lookup(dictionary: Dictionary,
           word: str,
           edit_distance_max: int = EDIT_DISTANCE_MAX,
           *,
           top_results_limit: int = TOP_RESULTS_LIMIT,
           maxlength: int = MAXLENGTH,
           verbose: int = VERBOSE) -> List[SuggestItem]:
    """
    Linear-scan spelling suggestions.

    Every dictionary term within `edit_distance_max` of the normalized word is
    a candidate; the result is sorted by ascending distance, then descending
    count, then term, and truncated to `top_results_limit`.

    `verbose` == 0 prunes the scan once the result budget is full (tighter
    distance bound, candidates that cannot outrank the worst kept item are not
    measured); any other value measures every candidate. Both return the same
    list.

    Raises ValueError for a negative `edit_distance_max` or `top_results_limit`.
    """
    if edit_distance_max < 0:
        raise ValueError(f"edit_distance_max must be >= 0 (got {edit_distance_max})")
    if top_results_limit < 0:
        raise ValueError(f"top_results_limit must be >= 0 (got {top_results_limit})")

    query = normalize_term(word)
    if top_results_limit == 0 or len(dictionary) == 0:
        return []
    # longer than every term by more than the bound: nothing can match
    if len(query) - edit_distance_max > dictionary.longest:
        return []

    # exact hit fills a one-item budget on its own
    count = dictionary.get(query)
    if count is not None and not verbose and top_results_limit <= 1 and not _too_long(query, maxlength):
        return [SuggestItem(query, 0, count)]

    if verbose:
        return _scan_all(dictionary, query, edit_distance_max, top_results_limit, maxlength)
    return _scan_top(dictionary, query, edit_distance_max, top_results_limit, maxlength)


def _scan_all(dictionary: Dictionary, query: str, bound: int, limit: int, maxlength: int) -> List[SuggestItem]:
    n = len(query)
    found: List[SuggestItem] = []
    for term, count in dictionary.items():
        if abs(len(term) - n) > bound:
            continue
        if _too_long(term, maxlength):
            continue
        d = damerau_levenshtein(query, term, bound)
        if d == EXCEEDS_BOUND:
            continue
        found.append(SuggestItem(term, d, count))
    found.sort(key=rank_key)
    return found[:limit]


def _scan_top(dictionary: Dictionary, query: str, bound: int, limit: int, maxlength: int) -> List[SuggestItem]:
    n = len(query)
    kept: List[_Rank] = []   # sorted, at most `limit` long
    for term, count in dictionary.items():
        gap = abs(len(term) - n)
        if gap > bound:
            continue
        if _too_long(term, maxlength):
            continue
        if len(kept) == limit:
            # best rank this term could reach without measuring it
            floor = 0 if term == query else max(1, gap)
            if (floor, -count, term) >= kept[-1]:
                continue

        d = damerau_levenshtein(query, term, bound)
        if d == EXCEEDS_BOUND:
            continue
        key = (d, -count, term)
        if len(kept) == limit:
            if key >= kept[-1]:
                continue
            kept.pop()
        bisect.insort(kept, key)
        if len(kept) == limit:
            # nothing farther than the worst kept item can get in
            bound = kept[-1][0]

    return [SuggestItem(term, d, -neg_count) for d, neg_count, term in kept]
