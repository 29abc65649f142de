from __future__ import annotations
import logging
from typing import Dict, Iterable

from .config import COUNT_MAX, TERM_INDEX, COUNT_INDEX
from .models import Dictionary
from .normalize import normalize_term, tokenize

log = logging.getLogger(__name__)


class EmptySourceError(ValueError):
    """A bulk build/load produced no usable entry; nothing was installed."""


def build_from_corpus(lines: Iterable[str]) -> Dictionary:
    """
    Count word frequencies in raw text.
    Every line is tokenized on non-alphanumeric boundaries; each lowercase
    token adds 1 to its count.
      build_from_corpus(["the cat", "the dog", "the cat"])
        -> {"the": 3, "cat": 2, "dog": 1}
    """
    counts: Dict[str, int] = {}
    n_lines = 0
    for line in lines:
        n_lines += 1
        for token in tokenize(line):
            c = counts.get(token, 0)
            if c < COUNT_MAX:
                counts[token] = c + 1

    if not counts:
        raise EmptySourceError(f"corpus produced no terms ({n_lines} lines read)")

    log.info("Built dictionary from corpus: lines=%d terms=%d", n_lines, len(counts))
    return Dictionary(counts)


def _parse_record(line: str, term_index: int, count_index: int) -> tuple[str, int] | None:
    """Return (term, count) or None for a malformed record."""
    fields = line.split()
    if len(fields) < 2 or term_index >= len(fields) or count_index >= len(fields):
        return None
    term = normalize_term(fields[term_index])
    if not term:
        return None
    raw = fields[count_index]
    # plain ASCII digits only: no sign, no underscores, no other scripts
    if not (raw.isascii() and raw.isdigit()):
        return None
    count = int(raw)
    if count < 1:
        return None
    return term, min(count, COUNT_MAX)


def load_from_table(lines: Iterable[str],
                    term_index: int = TERM_INDEX,
                    count_index: int = COUNT_INDEX) -> Dictionary:
    """
    Load a pre-built frequency table: one `term count` record per line,
    whitespace separated, columns chosen by index.

    Malformed records (too few fields, non-integer or non-positive count) are
    skipped and only counted. A term seen twice keeps its last count.
    Raises EmptySourceError when no record is usable.
    """
    if term_index < 0 or count_index < 0:
        raise ValueError(f"column indexes must be >= 0 (got term={term_index}, count={count_index})")

    counts: Dict[str, int] = {}
    skipped = 0
    n_lines = 0
    for line in lines:
        n_lines += 1
        if not line.strip():
            continue
        rec = _parse_record(line, term_index, count_index)
        if rec is None:
            skipped += 1
            continue
        term, count = rec
        counts[term] = count

    if skipped:
        log.warning("Skipped %d malformed record(s) out of %d lines", skipped, n_lines)
    if not counts:
        raise EmptySourceError(f"table produced no terms ({n_lines} lines read, {skipped} malformed)")

    log.info("Loaded dictionary table: lines=%d terms=%d", n_lines, len(counts))
    return Dictionary(counts, skipped=skipped)
