# linspell/engine.py
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from . import config as CFG
from .config import Settings
from .models import Dictionary, SuggestItem
from .dictionary import build_from_corpus, load_from_table
from .lookup import lookup
from .loader import iter_lines, iter_corpus_lines
from .storage import save_table

log = logging.getLogger(__name__)


class Engine:
    """
    Session object that owns one dictionary and answers lookups against it.

    Public API (used by CLI/Flask/GUI):
      * build(roots):            corpus folders -> word counts -> install
      * load(path, ...):         term/count table file -> install
      * build_from_lines / load_from_lines: same, from lines already in memory
      * lookup(word, ...):       ranked suggestions
      * correct(word):           best suggestion's term, or the word itself
      * save(path):              write the dictionary as a term/count table
      * shutdown():              drop the dictionary

    A rebuild never touches the dictionary an in-flight lookup is reading: the
    new instance is built aside and swapped in with one assignment. When a
    build fails the previous dictionary stays installed.
    """

    # ------------- lifecycle -------------

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.dictionary: Optional[Dictionary] = None
        self._rebuild_lock = threading.Lock()

    # /* ~~~ Build word counts from raw text folders ~~~ */
    def build(self, roots: Iterable[str], *, verbose: bool = False) -> Dictionary:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        roots = list(roots)
        if not roots:
            raise ValueError("build(): at least one corpus root is required")
        log.info("Building dictionary from corpus %s", roots)
        return self.build_from_lines(iter_corpus_lines(roots))

    def build_from_lines(self, lines: Iterable[str]) -> Dictionary:
        with self._rebuild_lock:
            return self._install(build_from_corpus(lines))

    # /* ~~~ Load a pre-built frequency table ~~~ */
    def load(
        self,
        path: str,
        *,
        term_index: int = CFG.TERM_INDEX,
        count_index: int = CFG.COUNT_INDEX,
        verbose: bool = False,
    ) -> Dictionary:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        log.info("Loading dictionary table from %s", path)
        return self.load_from_lines(iter_lines(path), term_index=term_index, count_index=count_index)

    def load_from_lines(
        self,
        lines: Iterable[str],
        *,
        term_index: int = CFG.TERM_INDEX,
        count_index: int = CFG.COUNT_INDEX,
    ) -> Dictionary:
        with self._rebuild_lock:
            return self._install(load_from_table(lines, term_index, count_index))

    # ------------- query -------------

    # /* ~~~ Ranked suggestions for one word ~~~ */
    def lookup(
        self,
        word: str,
        *,
        edit_distance_max: Optional[int] = None,
        top_k: Optional[int] = None,
    ) -> List[SuggestItem]:
        dictionary = self._require()
        s = self.settings
        return lookup(
            dictionary,
            word,
            s.edit_distance_max if edit_distance_max is None else edit_distance_max,
            top_results_limit=s.top_results_limit if top_k is None else top_k,
            maxlength=s.maxlength,
            verbose=s.verbose,
        )

    def correct(self, word: str) -> str:
        """Most likely spelling of `word`; unchanged when nothing is close enough."""
        hits = self.lookup(word, top_k=1)
        return hits[0].term if hits else word

    def save(self, path: str) -> None:
        dictionary = self._require()
        log.info("Saving dictionary table to %s (%d terms)", path, len(dictionary))
        save_table(dictionary, path)

    def stats(self) -> dict:
        dictionary = self.dictionary
        if dictionary is None:
            return {"terms": 0, "longest": 0, "skipped": 0}
        return {"terms": len(dictionary), "longest": dictionary.longest, "skipped": dictionary.skipped}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        with self._rebuild_lock:
            self.dictionary = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _install(self, dictionary: Dictionary) -> Dictionary:
        self.dictionary = dictionary
        log.info("Dictionary installed: terms=%d longest=%d skipped=%d",
                 len(dictionary), dictionary.longest, dictionary.skipped)
        return dictionary

    def _require(self) -> Dictionary:
        dictionary = self.dictionary
        if dictionary is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return dictionary
