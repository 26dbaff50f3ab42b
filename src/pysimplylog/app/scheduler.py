# ---------------------------------------------------------------------------
# File: scheduler.py
# ---------------------------------------------------------------------------
# Description:
#	Timer seam for pysimplylog.
#
# Notes:
#	- Scheduler is the only source of asynchronous callbacks.
#	- TkScheduler runs callbacks on the Tk main loop via after()/after_cancel(),
#	  so timers and user actions share one thread.
#	- After cancel(handle) returns, that handle's callback never runs.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/11/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

import tkinter as tk


TimerCallback = Callable[[], None]


@runtime_checkable
class Scheduler(Protocol):
	def call_later(self, delay: float, callback: TimerCallback) -> Any: ...
	def cancel(self, handle: Any) -> None: ...


class TkScheduler:
	"""
	Scheduler backed by a Tk widget's after() queue.
	"""

	def __init__(self, widget: tk.Misc) -> None:
		self._widget = widget

	def call_later(self, delay: float, callback: TimerCallback) -> str:
		ms = max(0, int(round(delay * 1000.0)))
		return self._widget.after(ms, callback)

	def cancel(self, handle: Any) -> None:
		if handle is None:
			return
		self._widget.after_cancel(handle)
