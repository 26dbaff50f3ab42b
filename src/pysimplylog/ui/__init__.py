# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pysimplylog.
#
# Notes:
#   - Uses lazy exports so importing pysimplylog.ui does not pull in every
#     widget module (PEP 562).
#   - Do NOT import from pysimplylog.ui inside ui modules; import specific
#     modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"ControlBar",
	"MainView",
	"StatusBar",
	"TrackedView",
	"TranscriptView",
	"ViewSession",
	"track_view",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pysimplylog.ui.component", "Component"),
	"ControlBar": ("pysimplylog.ui.control_bar", "ControlBar"),
	"MainView": ("pysimplylog.ui.main_view", "MainView"),
	"StatusBar": ("pysimplylog.ui.statusbar", "StatusBar"),
	"TrackedView": ("pysimplylog.ui.view_tracker", "TrackedView"),
	"TranscriptView": ("pysimplylog.ui.transcript_view", "TranscriptView"),
	"ViewSession": ("pysimplylog.ui.view_tracker", "ViewSession"),
	"track_view": ("pysimplylog.ui.view_tracker", "track_view"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pysimplylog.ui.component import Component
	from pysimplylog.ui.control_bar import ControlBar
	from pysimplylog.ui.main_view import MainView
	from pysimplylog.ui.statusbar import StatusBar
	from pysimplylog.ui.transcript_view import TranscriptView
	from pysimplylog.ui.view_tracker import TrackedView, ViewSession, track_view
