# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pysimplylog (config, logging, telemetry, models).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/10/2026	Paul G. LeDuc				Export telemetry clients
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import TelemetryConfig, load_config
from .errors import ConfigError, PySimplyLogError, TelemetryStateError
from .logging import get_app_logger, init_logging
from .models import LogEvent, LogLevel, MonitorEvent, RunState
from .telemetry import (
	LogTelemetryClient,
	MemoryTelemetryClient,
	NullTelemetryClient,
	TelemetryClient,
	build_client,
)

__all__ = [
	"ConfigError",
	"LogEvent",
	"LogLevel",
	"LogTelemetryClient",
	"MemoryTelemetryClient",
	"MonitorEvent",
	"NullTelemetryClient",
	"PySimplyLogError",
	"RunState",
	"TelemetryClient",
	"TelemetryConfig",
	"TelemetryStateError",
	"build_client",
	"get_app_logger",
	"init_logging",
	"load_config",
]
