# ---------------------------------------------------------------------------
# File: statusbar.py
# ---------------------------------------------------------------------------
# Description:
#	StatusBar component for pysimplylog.
#
# Notes:
#	- Named text sections laid out left to right.
#	- left shows the generator RunState, middle the last "Log Sent" line,
#	  right mirrors local log records (StatusBarLogHandler).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/14/2026	Paul G. LeDuc				Add run state helper
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

import tkinter as tk
from tkinter import ttk

from pysimplylog.core.models import RunState

from .component import Component


TkAnchor = Literal["w", "center", "e"]


# ---------------------------------------------------------------------------
# Logging integration
# ---------------------------------------------------------------------------

class StatusBarLogHandler(logging.Handler):
	"""
	Mirrors formatted log records into a StatusBar section.

	Never raises from emit(); a broken status line must not break logging.
	"""

	def __init__(
		self,
		statusbar: "StatusBar",
		*,
		section: str = "right",
		level: int = logging.INFO,
	) -> None:
		super().__init__(level=level)
		self._sb = statusbar
		self._section = section

	def emit(self, record: logging.LogRecord) -> None:
		try:
			msg = self.format(record)
		except Exception:
			self.handleError(record)
			return
		self._sb.set_text(self._section, msg)


# ---------------------------------------------------------------------------
# StatusBar
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class StatusBar(Component):
	sections: tuple[str, ...] = ("left", "middle", "right")
	text: dict[str, str] = field(default_factory=dict)

	_labels: dict[str, ttk.Label] = field(default_factory=dict, init=False, repr=False)
	log_handler: Optional[StatusBarLogHandler] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)

		for col, name in enumerate(self.sections):
			frame.columnconfigure(col, weight=1 if name == "middle" else 0)
			lbl = ttk.Label(frame, text=self.text.get(name, ""), anchor=self.anchor_for(name))
			lbl.grid(row=0, column=col, sticky="ew", padx=8, pady=2)
			self._labels[name] = lbl

		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="bottom", fill="x")

	def on_unmount(self) -> None:
		self._labels.clear()

	# -----------------------------------------------------------------------
	# Section API
	# -----------------------------------------------------------------------

	def set_text(self, section: str, value: str) -> None:
		self.text[section] = value

		lbl = self._labels.get(section)
		if lbl is None:
			return

		# Handlers may run off the Tk loop; defer the widget update to it.
		lbl.after_idle(lambda: lbl.config(text=value))

	def show_state(self, state: RunState) -> None:
		self.set_text("left", "Running" if state is RunState.RUNNING else "Stopped")

	# -----------------------------------------------------------------------
	# Logging integration
	# -----------------------------------------------------------------------

	def attach_logging(
		self,
		logger: logging.Logger,
		*,
		section: str = "right",
		level: int = logging.INFO,
		fmt: str = "%(levelname)s: %(message)s",
	) -> StatusBarLogHandler:
		h = StatusBarLogHandler(self, section=section, level=level)
		h.setFormatter(logging.Formatter(fmt))
		logger.addHandler(h)
		self.log_handler = h
		return h

	def detach_logging(self, logger: logging.Logger) -> None:
		if self.log_handler is None:
			return
		logger.removeHandler(self.log_handler)
		self.log_handler = None

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def anchor_for(self, section: str) -> TkAnchor:
		if section == "left":
			return "w"
		if section == "right":
			return "e"
		return "center"
