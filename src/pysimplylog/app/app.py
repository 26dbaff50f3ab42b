# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Main window for pysimplylog.
#
# Notes:
#   - Owns the component tree, commands, key bindings and the Tk scheduler.
#   - shutdown() runs the registered shutdown hooks (generator stop), then
#     unmounts components (closing view sessions), then destroys Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add ttkthemes theme + key binding
# 10/14/2026	Paul G. LeDuc				Add shutdown hooks
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pysimplylog.app.commands import Command, CommandRegistry
from pysimplylog.app.keys import KeyMap
from pysimplylog.app.scheduler import TkScheduler
from pysimplylog.core.logging import get_app_logger
from pysimplylog.ui.component import Component


DEFAULT_WIDTH = 520
DEFAULT_HEIGHT = 720
DEFAULT_THEME = "arc"

_log = get_app_logger("window")


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	In-process UI/logging options (width, height, theme, log_level, ...).
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


class App(tk.Tk):
	"""
	App

	Root window. Acts as the container for all UI components.
	"""

	def __init__(
		self,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)
		self.title_text = title or "pysimplylog"
		self.title(self.title_text)

		self.commands = CommandRegistry()
		self.keymap = KeyMap()
		self.scheduler = TkScheduler(self)

		self.components: list[Component] = []
		self._shutdown_hooks: list[Callable[[], None]] = []
		self._closed = False

		self.style = self._apply_theme(str(self.cfg.get("theme", DEFAULT_THEME)))

		self.update_idletasks()
		self._apply_geometry(self.cfg.get("width", DEFAULT_WIDTH), self.cfg.get("height", DEFAULT_HEIGHT))

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.protocol("WM_DELETE_WINDOW", self.shutdown)

	# -----------------------------------------------------------------------
	# Commands / keys
	# -----------------------------------------------------------------------

	def register_command(self, command: Command) -> None:
		self.commands.register(command)

	def invoke(self, command_id: str) -> Any:
		return self.commands.invoke(command_id)

	def bind_key(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		"""
		Map keyseq to command_id and bind it on the window.
		"""
		self.keymap.bind(keyseq, command_id, overwrite=overwrite)
		self.bind_all(keyseq, lambda _e, cid=command_id: self._invoke_from_key(cid))

	def bind_keymap(self, keymap: KeyMap) -> None:
		for keyseq, command_id in keymap.items():
			try:
				self.bind_key(keyseq, command_id)
			except tk.TclError:
				# Modifier names like "Command" exist only on some platforms.
				_log.debug("Key sequence not supported here: %s", keyseq)

	def _invoke_from_key(self, command_id: str) -> str:
		try:
			self.invoke(command_id)
		except KeyError:
			_log.warning("Key bound to unknown command: %s", command_id)
		return "break"

	# -----------------------------------------------------------------------
	# Component lifecycle management
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		self.components.append(component)
		component.mount(self.root_frame)
		component.layout()

	def remove_component(self, component: Component) -> None:
		if component not in self.components:
			return
		component.destroy()
		self.components.remove(component)

	def clear_components(self) -> None:
		for component in reversed(self.components):
			component.destroy()
		self.components.clear()

	# -----------------------------------------------------------------------
	# Shutdown
	# -----------------------------------------------------------------------

	def add_shutdown_hook(self, hook: Callable[[], None]) -> None:
		self._shutdown_hooks.append(hook)

	def shutdown(self) -> None:
		if self._closed:
			return
		self._closed = True

		for hook in self._shutdown_hooks:
			hook()

		self.clear_components()
		self.destroy()

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_theme(self, theme: str) -> Optional[ThemedStyle]:
		style = ThemedStyle(self)
		if theme not in style.get_themes():
			_log.warning("Unknown theme %r; keeping the Tk default", theme)
			return style
		style.set_theme(theme)
		return style

	def _apply_geometry(self, width: Any, height: Any) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(int(width), screen_w))
		win_h = max(1, min(int(height), screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.mainloop()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
