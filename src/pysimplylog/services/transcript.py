# ---------------------------------------------------------------------------
# File: transcript.py
# ---------------------------------------------------------------------------
# Description:
#	Transcript service for pysimplylog.
#
# Notes:
#	- TranscriptService owns the ordered, append-only list of lines shown
#	  in the "Log Output" pane.
#	- UI widgets (e.g., TranscriptView) may be attached as a sink.
#	- Safe to call even if no sink is attached.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Drop unused change callback
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TranscriptSink(Protocol):
	"""
	Minimal interface implemented by UI transcript widgets.
	"""

	def append_line(self, line: str) -> None: ...


@dataclass(slots=True)
class TranscriptService:
	"""
	TranscriptService

	Holds transcript lines and publishes each new one to an optional sink.
	"""

	lines: list[str] = field(default_factory=list)

	sink: Optional[TranscriptSink] = None

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def attach_sink(self, sink: Optional[TranscriptSink]) -> None:
		"""
		Attach or detach a sink. Lines appended before the sink existed
		are replayed into it in order.
		"""
		self.sink = sink
		if sink is None:
			return
		for line in self.lines:
			sink.append_line(line)

	# -----------------------------------------------------------------------
	# Mutators / accessors
	# -----------------------------------------------------------------------

	def append(self, line: str) -> None:
		self.lines.append(line)
		if self.sink is not None:
			self.sink.append_line(line)

	def snapshot(self) -> tuple[str, ...]:
		return tuple(self.lines)

	def __len__(self) -> int:
		return len(self.lines)
