from __future__ import annotations
import os
from typing import Iterable, Iterator, List

from .config import CORPUS_EXTS

# Progress logging (set LINSPELL_VERBOSE=1 to enable)
VERBOSE = os.environ.get("LINSPELL_VERBOSE") == "1"
PROGRESS_EVERY_LINES = 100_000
PROGRESS_EVERY_FILES = 500

def iter_lines(path: str) -> Iterator[str]:
    """
    Lazily yield the lines of a UTF-8 text file without their line ending.
    Forward-only: call again to restart. Raises FileNotFoundError up front.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    return _read_lines(path)

def _read_lines(path: str) -> Iterator[str]:
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for ln in f:
            yield ln.rstrip("\r\n")

def _iter_corpus_files(roots: Iterable[str]) -> Iterator[str]:
    """Yield corpus files recursively under each root, in sorted order."""
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            raise FileNotFoundError(root)
        found: List[str] = []
        for dirpath, _, filenames in os.walk(root):
            for fn in filenames:
                if fn.lower().endswith(CORPUS_EXTS):
                    found.append(os.path.join(dirpath, fn))
        yield from sorted(found)

def iter_corpus_lines(roots: Iterable[str]) -> Iterator[str]:
    """
    Lines of every corpus file under the given roots (folders scanned
    recursively for *.txt, plain files read as-is).
    """
    file_count = 0
    line_count = 0
    for path in _iter_corpus_files(roots):
        try:
            lines = iter_lines(path)
        except OSError:
            continue
        for ln in lines:
            line_count += 1
            if VERBOSE and line_count % PROGRESS_EVERY_LINES == 0:
                print(f"[read] lines={line_count:,}")
            yield ln

        file_count += 1
        if VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            print(f"[scanned] files={file_count:,}")

    if VERBOSE:
        print(f"[done] files={file_count:,} lines={line_count:,}")
