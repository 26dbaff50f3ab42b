# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types for pysimplylog.
#
# Notes:
#	- ConfigError is fatal at startup (__main__ turns it into SystemExit).
#	- TelemetryStateError means the telemetry contract was used out of order.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class PySimplyLogError(Exception):
	"""
	Base class for all pysimplylog errors.
	"""


class ConfigError(PySimplyLogError):
	"""
	Required configuration is missing or an optional value is malformed.
	"""

	def __init__(self, message: str, *, variable: str | None = None) -> None:
		super().__init__(message)
		self.variable = variable


class TelemetryStateError(PySimplyLogError):
	"""
	Telemetry client used before initialize()/enable_*() was called.
	"""
