# ---------------------------------------------------------------------------
# File: models.py
# ---------------------------------------------------------------------------
# Description:
#	Shared value types for pysimplylog.
#
# Notes:
#	- All records are immutable; attributes are copied on construction.
#	- LogLevel values are the names shown to users ("Level: info").
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/10/2026	Paul G. LeDuc				Add MonitorEvent for recording clients
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


Attributes = Dict[str, Any]


# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------

class LogLevel(str, Enum):
	"""
	Telemetry log levels, declared in increasing severity.
	"""
	DEBUG = "debug"
	INFO = "info"
	NOTICE = "notice"
	WARNING = "warning"
	ERROR = "error"
	CRITICAL = "critical"

	@property
	def severity(self) -> int:
		return _SEVERITY[self]

	@property
	def method_name(self) -> str:
		"""
		Name of the TelemetryLogger method that emits this level.
		"""
		return "warn" if self is LogLevel.WARNING else self.value

	def __str__(self) -> str:
		return self.value


_SEVERITY: dict[LogLevel, int] = {lvl: i for i, lvl in enumerate(LogLevel)}


class RunState(str, Enum):
	STOPPED = "stopped"
	RUNNING = "running"

	def __str__(self) -> str:
		return self.value


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LogEvent:
	message: str
	level: LogLevel
	attributes: Attributes = field(default_factory=dict)
	logger: str = ""

	def __post_init__(self) -> None:
		object.__setattr__(self, "attributes", dict(self.attributes))


@dataclass(frozen=True, slots=True)
class MonitorEvent:
	"""
	One call made against a monitoring backend.

	kind is one of: "view_start", "view_stop", "action", "error".
	"""
	kind: str
	key: str = ""
	name: str = ""
	attributes: Attributes = field(default_factory=dict)
	error: Optional[BaseException] = None

	def __post_init__(self) -> None:
		object.__setattr__(self, "attributes", dict(self.attributes))
