from __future__ import annotations
import os
from .models import Dictionary

def save_table(dictionary: Dictionary, path: str) -> None:
    """
    Write `term count` records, most frequent first, so the file can be read
    back with load_from_table(..., term_index=0, count_index=1).
    Written to a temp file and moved into place.
    """
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    rows = sorted(dictionary.items(), key=lambda kv: (-kv[1], kv[0]))
    with open(tmp, "w", encoding="utf-8") as f:
        for term, count in rows:
            f.write(f"{term} {count}\n")
    os.replace(tmp, path)
