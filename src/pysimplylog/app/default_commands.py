# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for pysimplylog.
#
# Notes:
#	- generator.* commands drive the EventGenerator.
#	- generator.start / generator.stop are enabled only in the matching state.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable

from pysimplylog.app.commands import Command, CommandRegistry
from pysimplylog.app.generator import EventGenerator


def register_default_commands(
	registry: CommandRegistry,
	generator: EventGenerator,
	quit_fn: Callable[[], None],
) -> None:
	registry.register(Command(
		id="generator.toggle",
		label="Start/Stop",
		description="Start or stop event generation.",
		handler=generator.toggle,
	))

	registry.register(Command(
		id="generator.start",
		label="Start",
		description="Start event generation.",
		handler=generator.start,
		enabled_fn=lambda: not generator.running,
	))

	registry.register(Command(
		id="generator.stop",
		label="Stop",
		description="Stop event generation.",
		handler=generator.stop,
		enabled_fn=lambda: generator.running,
	))

	registry.register(Command(
		id="app.quit",
		label="Quit",
		description="Stop generation and close the window.",
		handler=quit_fn,
	))
