# app.py
# CustomTkinter GUI for the Typo Checker (dark theme).
# - Pick a word list, an optional keyword list and a text file to check.
# - Background check thread (keeps UI responsive); the checker is reused while
#   the dictionary settings stay the same, so its typo cache carries over.
# - Report & event log panes.

from __future__ import annotations
import threading
import time
from typing import Optional, Tuple

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from spelling import TypoChecker, format_report
from spelling import config as CFG


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class TypoCheckerApp(ctk.CTk):
    """Dark-themed GUI that runs TypoChecker over a chosen file."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Typo Checker")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._dictionary_file: str = CFG.DEFAULT_DICTIONARY_FILE
        self._keyword_file: Optional[str] = None
        self._target_file: Optional[str] = None
        self._checker: Optional[TypoChecker] = None
        self._checker_key: Optional[Tuple] = None
        self._worker: Optional[threading.Thread] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # report
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_options()
        self._build_report()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self.destroy)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(header, text="Typo Checker", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Dictionary…", command=self._choose_dictionary).grid(
            row=0, column=0, padx=(12, 6), pady=(10, 4)
        )
        self.lbl_dictionary = ctk.CTkLabel(bar, text=shorten_path(self._dictionary_file), anchor="w")
        self.lbl_dictionary.grid(row=0, column=1, sticky="ew", padx=6, pady=(10, 4))

        ctk.CTkButton(bar, text="Keywords…", command=self._choose_keywords).grid(
            row=1, column=0, padx=(12, 6), pady=4
        )
        self.lbl_keywords = ctk.CTkLabel(bar, text="(none)", anchor="w")
        self.lbl_keywords.grid(row=1, column=1, sticky="ew", padx=6, pady=4)

        ctk.CTkButton(bar, text="Text file…", command=self._choose_target).grid(
            row=2, column=0, padx=(12, 6), pady=(4, 10)
        )
        self.lbl_target = ctk.CTkLabel(bar, text="No file selected", anchor="w")
        self.lbl_target.grid(row=2, column=1, sticky="ew", padx=6, pady=(4, 10))

    def _build_options(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(5, weight=1)

        ctk.CTkLabel(box, text="Min length:", font=self.font_label).grid(row=0, column=0, padx=(12, 4), pady=10)
        self.entry_min_len = ctk.CTkEntry(box, width=56)
        self.entry_min_len.insert(0, str(CFG.MIN_WORD_LEN))
        self.entry_min_len.grid(row=0, column=1, padx=4, pady=10)

        ctk.CTkLabel(box, text="Distance:", font=self.font_label).grid(row=0, column=2, padx=(12, 4), pady=10)
        self.entry_distance = ctk.CTkEntry(box, width=56)
        self.entry_distance.insert(0, str(CFG.LEVENSHTEIN_DISTANCE))
        self.entry_distance.grid(row=0, column=3, padx=4, pady=10)

        self.btn_check = ctk.CTkButton(box, text="Check", command=self._start_check)
        self.btn_check.grid(row=0, column=4, padx=12, pady=10)

        self.progress = ctk.CTkProgressBar(box, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=5, sticky="ew", padx=6, pady=10)

        self.lbl_status = ctk.CTkLabel(box, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=6, sticky="e", padx=12, pady=10)

    def _build_report(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Report", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_report = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_report.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_report.configure(state="disabled")
        self._set_report("(no report yet — choose a text file and press Check)")

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
        self._log("GUI ready. Choose a text file to begin.")

    # --------- file selection ---------

    def _choose_dictionary(self) -> None:
        path = fd.askopenfilename(title="Choose word list")
        if path:
            self._dictionary_file = path
            self.lbl_dictionary.configure(text=shorten_path(path))

    def _choose_keywords(self) -> None:
        path = fd.askopenfilename(title="Choose keyword list")
        if path:
            self._keyword_file = path
            self.lbl_keywords.configure(text=shorten_path(path))

    def _choose_target(self) -> None:
        path = fd.askopenfilename(
            title="Choose text file",
            filetypes=[("Text files", "*.txt *.md *.rst"), ("All files", "*.*")]
        )
        if path:
            self._target_file = path
            self.lbl_target.configure(text=shorten_path(path))

    # --------- check pipeline (threaded) ---------

    def _read_int(self, entry: ctk.CTkEntry, name: str) -> Optional[int]:
        try:
            value = int(entry.get())
        except ValueError:
            value = 0
        if value < 1:
            mb.showerror("Invalid option", f"{name} must be a positive integer.")
            return None
        return value

    def _start_check(self) -> None:
        if self._worker and self._worker.is_alive():
            mb.showinfo("Checking", "A check is already running. Please wait.")
            return
        if not self._target_file:
            mb.showinfo("Checking", "Choose a text file first.")
            return
        min_len = self._read_int(self.entry_min_len, "Min length")
        distance = self._read_int(self.entry_distance, "Distance")
        if min_len is None or distance is None:
            return

        self._set_status("Checking…")
        self.progress.start()
        self.btn_check.configure(state="disabled")

        self._worker = threading.Thread(
            target=self._check_worker, args=(self._target_file, min_len, distance), daemon=True
        )
        self._worker.start()

    def _check_worker(self, target: str, min_len: int, distance: int) -> None:
        key = (self._dictionary_file, self._keyword_file, min_len, distance)
        try:
            if self._checker is None or self._checker_key != key:
                self.after(0, self._log, f"Loading dictionary: {self._dictionary_file}")
                self._checker = TypoChecker(
                    min_word_len=min_len,
                    levenshtein_distance=distance,
                    dictionary_file=self._dictionary_file,
                    keyword_file=self._keyword_file,
                )
                self._checker_key = key
            t0 = time.perf_counter()
            found = self._checker.check_file(target)
            elapsed = time.perf_counter() - t0
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_check_error(e))
            return

        report = format_report(found)
        self.after(0, lambda: self._on_check_ok(report, len(found), elapsed))

    def _on_check_ok(self, report: str, n_typos: int, elapsed: float) -> None:
        self.progress.stop()
        self.btn_check.configure(state="normal")
        self._set_status(f"{n_typos:,} possible typos in {elapsed:.2f}s")
        self._set_report(report or "(no typos found)")
        self._log(f"Check done: {n_typos} possible typos, {self._checker.cache_size} cached words.")

    def _on_check_error(self, exc: Exception) -> None:
        self.progress.stop()
        self.btn_check.configure(state="normal")
        self._set_status("Error while checking.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Check error", f"{exc}\nSee event log for details.")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_report(self, text: str) -> None:
        self.txt_report.configure(state="normal")
        self.txt_report.delete("0.0", "end")
        if text:
            self.txt_report.insert("end", text)
        self.txt_report.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = TypoCheckerApp()
    app.mainloop()
