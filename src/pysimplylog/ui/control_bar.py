# ---------------------------------------------------------------------------
# File: control_bar.py
# ---------------------------------------------------------------------------
# Description:
#	Start/Stop control row for pysimplylog.
#
# Notes:
#	- The button invokes a callback (normally the "generator.toggle" command).
#	- set_state() relabels the button; it never changes state itself.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import tkinter as tk
from tkinter import ttk

from pysimplylog.core.models import RunState

from .component import Component


def button_label(state: RunState) -> str:
	return "Stop" if state is RunState.RUNNING else "Start"


@dataclass(eq=False)
class ControlBar(Component):
	on_toggle: Optional[Callable[[], object]] = None
	state: RunState = RunState.STOPPED

	_button: ttk.Button | None = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)

		ttk.Label(frame, text="\U0001F310").pack(side="left", padx=(0, 8))

		self._button = ttk.Button(frame, text=button_label(self.state), command=self._clicked)
		self._button.pack(side="left")
		return frame

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(side="bottom", pady=8)

	def on_unmount(self) -> None:
		self._button = None

	def set_state(self, state: RunState) -> None:
		self.state = state
		if self._button is not None:
			self._button.configure(text=button_label(state))

	def _clicked(self) -> None:
		if self.on_toggle is not None:
			self.on_toggle()
