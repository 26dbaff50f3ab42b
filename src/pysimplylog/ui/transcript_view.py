# ---------------------------------------------------------------------------
# File: transcript_view.py
# ---------------------------------------------------------------------------
# Description:
#	Read-only, auto-scrolling transcript for the "Log Output" pane.
#
# Notes:
#	- Implements TranscriptSink (append_line).
#	- Lines appended before mount are buffered and written on mount.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field

import tkinter as tk
from tkinter import ttk

from .component import Component


@dataclass(eq=False)
class TranscriptView(Component):
	title: str = "Log Output"

	_text: tk.Text | None = field(default=None, init=False, repr=False)
	_vsb: ttk.Scrollbar | None = field(default=None, init=False, repr=False)
	_pending: list[str] = field(default_factory=list, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		root = ttk.LabelFrame(parent, text=self.title)

		self._text = tk.Text(root, wrap="word", height=20)
		self._vsb = ttk.Scrollbar(root, orient="vertical", command=self._text.yview)
		self._text.configure(yscrollcommand=self._vsb.set)

		self._text.grid(row=0, column=0, sticky="nsew", padx=(8, 0), pady=8)
		self._vsb.grid(row=0, column=1, sticky="ns", pady=8)

		root.rowconfigure(0, weight=1)
		root.columnconfigure(0, weight=1)

		self._text.configure(state="disabled")
		return root

	def on_mount(self) -> None:
		pending, self._pending = self._pending, []
		for line in pending:
			self._insert(line)

	def on_unmount(self) -> None:
		self._text = None
		self._vsb = None

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	def append_line(self, line: str) -> None:
		if self._text is None:
			self._pending.append(line)
			return
		self._insert(line)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _insert(self, line: str) -> None:
		if self._text is None:
			return
		self._text.configure(state="normal")
		self._text.insert("end", line + "\n")
		self._text.configure(state="disabled")
		self._text.see("end")
