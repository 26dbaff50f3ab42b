# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pysimplylog.
#
# Notes:
#   - Lazy exports: App pulls in Tk and ttkthemes, the generator does not.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"EventGenerator",
	"TkScheduler",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pysimplylog.app.app", "App"),
	"EventGenerator": ("pysimplylog.app.generator", "EventGenerator"),
	"TkScheduler": ("pysimplylog.app.scheduler", "TkScheduler"),
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
	from pysimplylog.app.app import App
	from pysimplylog.app.generator import EventGenerator
	from pysimplylog.app.scheduler import TkScheduler
