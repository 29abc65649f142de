"""Public API for the LinSpell linear-scan spelling corrector."""
from __future__ import annotations
from .config import Settings
from .models import Dictionary, SuggestItem
from .distance import damerau_levenshtein, EXCEEDS_BOUND
from .dictionary import build_from_corpus, load_from_table, EmptySourceError
from .lookup import lookup
from .engine import Engine

__all__ = [
    "Settings",
    "Dictionary",
    "SuggestItem",
    "damerau_levenshtein",
    "EXCEEDS_BOUND",
    "build_from_corpus",
    "load_from_table",
    "EmptySourceError",
    "lookup",
    "Engine",
]
