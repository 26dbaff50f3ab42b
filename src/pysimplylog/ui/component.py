# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#   Base UI Component for pysimplylog (Tkinter).
#
# Notes:
#   Composite pattern: every component can contain child components.
#   on_mount()/on_unmount() are the lifecycle hooks subclasses use to
#   bracket work with the component's visible lifetime.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# 10/13/2026	Paul G. LeDuc				Add on_mount/on_unmount hooks
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass(eq=False)
class Component:
	"""
	Base UI component.

	- id / name:	identity for lookup and debugging (auto-filled).
	- mount():		build the root widget, mount children, then on_mount().
	- destroy():	on_unmount(), destroy children, then the root widget.
	- layout():		default is pack filling the parent.
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def mounted(self) -> bool:
		return self.root is not None

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.get_child_parent())

		self.on_mount()

	def destroy(self) -> None:
		if self.root is not None:
			self.on_unmount()

		for child in list(self.components):
			child.destroy()

		if self.root is not None:
			self.root.destroy()
			self.root = None

	def on_mount(self) -> None:
		"""
		Called once the component and its children are mounted.
		"""

	def on_unmount(self) -> None:
		"""
		Called before the component's widgets are destroyed.
		"""

	# -----------------------------------------------------------------------
	# Building / layout
	# -----------------------------------------------------------------------

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: id={self.id!r} name={self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)
		if self.root is not None:
			child.mount(self.get_child_parent())
			self.layout()

	def remove_component(self, child: "Component") -> None:
		if child in self.components:
			child.destroy()
			self.components.remove(child)

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(fill="both", expand=True)

		for child in self.components:
			child.layout()
