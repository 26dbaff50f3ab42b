# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Key bindings for pysimplylog (Tk key sequence -> command id).
#
# Notes:
#   - KeyMap is pure mapping; App does the Tk bind().
#   - Quit is platform-aware (Command on macOS, Control elsewhere).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Merge default bindings into keys.py
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class KeyMap:
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq or not command_id:
			raise ValueError("keyseq and command_id must be non-empty strings")
		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")
		self._bindings[keyseq] = command_id

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())


def build_default_keymap(platform: str | None = None) -> KeyMap:
	km = KeyMap()
	is_mac = (platform or sys.platform) == "darwin"

	km.bind("<Control-t>", "generator.toggle")

	if is_mac:
		km.bind("<Command-t>", "generator.toggle")
		km.bind("<Command-q>", "app.quit")
	km.bind("<Control-q>", "app.quit")

	return km
