# ---------------------------------------------------------------------------
# File: view_tracker.py
# ---------------------------------------------------------------------------
# Description:
#	Binds a view's visible lifetime to a named monitoring view session.
#
# Notes:
#	- ViewSession is a scoped guard: open()/close() or "with" block.
#	  Opening an open session or closing a closed one does nothing, so each
#	  visibility cycle produces exactly one start and one stop.
#	- TrackedView wraps any Component: mount opens, unmount closes.
#	- Sessions are keyed by name; trackers with distinct names are
#	  independent.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Move start/stop into Component hooks
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import tkinter as tk
from tkinter import ttk

from .component import Component


class ViewTrackingService(Protocol):
	def start_view_tracking(self, name: str, attributes: Optional[dict[str, Any]] = None) -> None: ...
	def stop_view_tracking(self, name: str) -> None: ...


class ViewSession:
	"""
	One named view session.
	"""

	def __init__(
		self,
		name: str,
		service: ViewTrackingService,
		attributes: Optional[dict[str, Any]] = None,
	) -> None:
		if not name:
			raise ValueError("View session name must be a non-empty string")
		self.name = name
		self._service = service
		self._attributes = dict(attributes or {})
		self._open = False

	@property
	def is_open(self) -> bool:
		return self._open

	def open(self) -> bool:
		"""
		Start the session. Returns False if it was already open.
		"""
		if self._open:
			return False
		self._service.start_view_tracking(self.name, dict(self._attributes))
		self._open = True
		return True

	def close(self) -> bool:
		"""
		Stop the session. Returns False if it was not open.
		"""
		if not self._open:
			return False
		self._open = False
		self._service.stop_view_tracking(self.name)
		return True

	def __enter__(self) -> "ViewSession":
		self.open()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} name={self.name!r} open={self._open}>"


@dataclass(eq=False)
class TrackedView(Component):
	"""
	Container that tracks its content as a view session named tracking_name.
	"""
	content: Optional[Component] = None
	tracking_name: str = ""
	service: Optional[ViewTrackingService] = None

	session: Optional[ViewSession] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		super().__post_init__()
		if self.service is None:
			raise ValueError("TrackedView requires a view tracking service")
		if not self.tracking_name:
			self.tracking_name = self.content.name if self.content and self.content.name else str(self.name)
		self.session = ViewSession(self.tracking_name, self.service)
		if self.content is not None and self.content not in self.components:
			self.components.append(self.content)

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def on_mount(self) -> None:
		if self.session is not None:
			self.session.open()

	def on_unmount(self) -> None:
		if self.session is not None:
			self.session.close()


def track_view(component: Component, name: str, service: ViewTrackingService) -> TrackedView:
	"""
	Wrap component so it is tracked as the view session name.
	"""
	return TrackedView(content=component, tracking_name=name, service=service)
