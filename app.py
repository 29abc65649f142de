# app.py
# CustomTkinter GUI for LinSpell (dark theme).
# - Load a term/count table OR build counts from a corpus folder.
# - Background loading thread (keeps UI responsive).
# - Live lookup with debounce; suggestions & event log panes.

from __future__ import annotations
import threading
import time
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from linspell.engine import Engine
from linspell.models import SuggestItem


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class LinSpellApp(ctk.CTk):
    """Dark-themed GUI that loads a dictionary and shows suggestions while typing."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("LinSpell")
        self.geometry("760x600")
        self.minsize(680, 520)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._current_source_label: str = "No source selected"

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="LinSpell spelling correction", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        btn_table = ctk.CTkButton(bar, text="Load Dictionary", command=self._choose_table)
        btn_table.grid(row=0, column=0, padx=(12, 6), pady=10)

        btn_corpus = ctk.CTkButton(bar, text="Build From Folder", command=self._choose_corpus)
        btn_corpus.grid(row=0, column=1, padx=(0, 6), pady=10, sticky="w")

        self.lbl_source = ctk.CTkLabel(bar, text=self._current_source_label, anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Word:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Type a (mis)spelled word…")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Suggestions", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no suggestions yet — load a dictionary and start typing)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Load a dictionary file or build one from a folder.")

    # --------- source selection ---------

    def _choose_table(self) -> None:
        path = fd.askopenfilename(
            title="Choose term/count dictionary",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        self._start_loading(mode="table", source=path)

    def _choose_corpus(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if not path:
            return
        self._start_loading(mode="corpus", source=path)

    # --------- loading pipeline (threaded) ---------

    def _start_loading(self, mode: str, source: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A dictionary is already loading. Please wait.")
            return

        tag = "Dictionary" if mode == "table" else "Corpus"
        self._current_source_label = f"{tag}: {shorten_path(source)}"
        self.lbl_source.configure(text=self._current_source_label)
        self._set_status(f"Loading {tag.lower()}…")
        self.progress.start()

        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(mode, source), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, mode: str, source: str) -> None:
        t0 = time.perf_counter()
        try:
            if mode == "table":
                dictionary = self._engine.load(source)
            else:
                dictionary = self._engine.build([source])
        except (OSError, ValueError) as exc:
            self.after(0, self._on_load_error, exc)
            return

        ms = (time.perf_counter() - t0) * 1000
        n, skipped = len(dictionary), dictionary.skipped
        self.after(0, self._on_load_ok, n, skipped, ms)

    def _on_load_ok(self, n_terms: int, skipped: int, ms: float) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_terms:,} terms.")
        self._log(f"Dictionary ready ({n_terms} terms, {skipped} malformed lines skipped) in {ms:.0f} ms.")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading dictionary.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load dictionary.\nSee event log for details.")

    # --------- lookup ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q.strip():
            self._set_results("")
            return
        if self._engine.dictionary is None:
            self._set_results("error: please load a dictionary first.")
            return

        t0 = time.perf_counter()
        results = self._engine.lookup(q)
        ms = (time.perf_counter() - t0) * 1000

        if not results:
            self._set_results(f"No results :(\n\nLookup time: {ms:.2f} ms")
            return

        lines = [self._fmt(r) for r in results]
        lines.append(f"\nLookup time: {ms:.2f} ms")
        self._set_results("\n".join(lines))

    @staticmethod
    def _fmt(r: SuggestItem) -> str:
        return f"{r.term:<24} distance: {r.distance}  count: {r.count:,}"

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = LinSpellApp()
    app.mainloop()
