from __future__ import annotations
import re
from typing import List

# /* ~~~ a token is a run of letters/digits; underscore and punctuation split ~~~ */
_TOKEN = re.compile(r"[^\W_]+")

def normalize_term(text: str) -> str:
    """Case-fold a term for storage and comparison: trimmed and lowercased."""
    return text.strip().lower()

def tokenize(text: str) -> List[str]:
    """
    Split raw text into lowercase tokens on non-alphanumeric boundaries.
    Empty tokens never appear in the output.
      tokenize("The cat's hat!") -> ["the", "cat", "s", "hat"]
    """
    return _TOKEN.findall(text.lower())
