from __future__ import annotations
from dataclasses import dataclass

EDIT_DISTANCE_MAX: int = 2
TOP_RESULTS_LIMIT: int = 3

# Longest dictionary term considered during lookup (0 = no cap)
MAXLENGTH: int = 0

# 0 = pruned scan (stop widening once the result budget is full), non-zero = exhaustive scan
VERBOSE: int = 0

# Column positions in a term/count table
TERM_INDEX: int = 0
COUNT_INDEX: int = 1

# Counts saturate at the signed 64-bit maximum
COUNT_MAX: int = 2**63 - 1

# /* ~~~ corpus folders: which files are read when building from raw text ~~~ */
CORPUS_EXTS = (".txt",)


@dataclass(frozen=True)
class Settings:
    edit_distance_max: int = EDIT_DISTANCE_MAX
    top_results_limit: int = TOP_RESULTS_LIMIT
    maxlength: int = MAXLENGTH
    verbose: int = VERBOSE

    def __post_init__(self) -> None:
        for name in ("edit_distance_max", "top_results_limit", "maxlength"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0 (got {value})")
