from __future__ import annotations
from dataclasses import dataclass, field, asdict
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from .normalize import normalize_term

@dataclass(frozen=True)
class SuggestItem:
    term: str
    distance: int             # 0..edit_distance_max
    count: int                # copied from the dictionary at lookup time

    def to_dict(self) -> dict:
        return asdict(self)

@dataclass(frozen=True)
class Dictionary:
    """
    Read-only term -> count mapping.
    Keys are normalized, non-empty terms; counts are >= 1 (ValueError otherwise).
    `skipped` is the number of malformed records dropped while the dictionary
    was built, `longest` the length of the longest term.
    """
    counts: Mapping[str, int] = field(default_factory=dict)
    skipped: int = 0
    longest: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        for term, count in self.counts.items():
            if not term or normalize_term(term) != term:
                raise ValueError(f"dictionary keys must be non-empty normalized terms (got {term!r})")
            if count < 1:
                raise ValueError(f"count for {term!r} must be >= 1 (got {count})")
        # freeze the mapping so lookups can share it across threads
        if not isinstance(self.counts, MappingProxyType):
            object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))
        object.__setattr__(self, "longest", max(map(len, self.counts), default=0))

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, term: object) -> bool:
        return term in self.counts

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def get(self, term: str) -> Optional[int]:
        return self.counts.get(term)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self.counts.items())
