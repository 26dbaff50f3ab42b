# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#   Command definitions + registry for pysimplylog.
#
# Notes:
#   Commands are the single invocation path for UI actions (button, keys).
#   Handlers take no arguments; they close over the objects they drive.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


CommandHandler = Callable[[], Any]
EnabledCheck = Callable[[], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	An action invokable by id.

	- label:		Button/menu text.
	- enabled_fn:	Optional dynamic enablement; disabled commands are skipped.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self) -> bool:
		return True if self.enabled_fn is None else bool(self.enabled_fn())


class CommandRegistry:
	"""
	Commands by id.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")
		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")
		self._commands[command.id] = command

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def ids(self) -> list[str]:
		return list(self._commands)

	def invoke(self, command_id: str) -> Any:
		"""
		Run a command's handler.

		Raises KeyError for unknown ids; returns None without running the
		handler when the command is disabled.
		"""
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")
		if not command.is_enabled():
			return None
		return command.handler()
