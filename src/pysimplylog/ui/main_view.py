# ---------------------------------------------------------------------------
# File: main_view.py
# ---------------------------------------------------------------------------
# Description:
#	The single window content: transcript above, Start/Stop below.
#
# Notes:
#	- Children are plain Components; wiring to services happens in
#	  __main__.build_app().
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import tkinter as tk
from tkinter import ttk

from .component import Component
from .control_bar import ControlBar
from .transcript_view import TranscriptView


@dataclass(eq=False)
class MainView(Component):
	on_toggle: Optional[Callable[[], object]] = None

	transcript: TranscriptView = field(default_factory=TranscriptView)
	controls: ControlBar = field(init=False)

	def __post_init__(self) -> None:
		super().__post_init__()
		self.controls = ControlBar(on_toggle=self.on_toggle)
		# Controls first so pack reserves the bottom row before the transcript expands.
		self.components.extend([self.controls, self.transcript])

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent, padding=8)
