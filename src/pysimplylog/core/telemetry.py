# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Telemetry client contract for pysimplylog plus bundled clients.
#
#   The contract mirrors what a vendor logging + RUM SDK exposes:
#     - initialize / enable_logs / enable_monitoring
#     - create_logger -> TelemetryLogger (leveled methods)
#     - monitor -> Monitor (views, actions, errors)
#
#   Bundled clients:
#     - LogTelemetryClient		renders every call via Python logging
#     - MemoryTelemetryClient	records calls for tests and inspection
#     - NullTelemetryClient		no-op
#
# Notes:
#   - Transport, batching and delivery belong to the backend client; the
#     bundled clients are local only.
#   - All clients share the state rules in _BaseTelemetryClient:
#     loggers need initialize() + enable_logs(); the monitor needs
#     enable_monitoring().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/10/2026	Paul G. LeDuc				Split sinks into logger + monitor
# 10/11/2026	Paul G. LeDuc				Enforce initialize-before-logger ordering
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import logging
from typing import Optional, Protocol, runtime_checkable

from .errors import TelemetryStateError
from .models import Attributes, LogEvent, LogLevel, MonitorEvent


NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

_STDLIB_LEVELS: dict[LogLevel, int] = {
	LogLevel.DEBUG: logging.DEBUG,
	LogLevel.INFO: logging.INFO,
	LogLevel.NOTICE: NOTICE,
	LogLevel.WARNING: logging.WARNING,
	LogLevel.ERROR: logging.ERROR,
	LogLevel.CRITICAL: logging.CRITICAL,
}

CONSOLE_FORMATS = ("short", "json")


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------

@runtime_checkable
class TelemetryLogger(Protocol):
	def debug(self, message: str, attributes: Optional[Attributes] = None) -> None: ...
	def info(self, message: str, attributes: Optional[Attributes] = None) -> None: ...
	def notice(self, message: str, attributes: Optional[Attributes] = None) -> None: ...
	def warn(self, message: str, attributes: Optional[Attributes] = None) -> None: ...
	def error(self, message: str, attributes: Optional[Attributes] = None) -> None: ...
	def critical(self, message: str, attributes: Optional[Attributes] = None) -> None: ...


@runtime_checkable
class Monitor(Protocol):
	def start_view(self, key: str, name: str, attributes: Optional[Attributes] = None) -> None: ...
	def stop_view(self, key: str) -> None: ...
	def add_action(self, type: str, name: str, attributes: Optional[Attributes] = None) -> None: ...
	def add_error(self, error: BaseException, source: str, attributes: Optional[Attributes] = None) -> None: ...


@runtime_checkable
class TelemetryClient(Protocol):
	def initialize(self, client_token: str, env: str, service: str, site: Optional[str] = None) -> None: ...
	def enable_logs(self) -> None: ...
	def enable_monitoring(self, application_id: str, long_task_threshold: float) -> None: ...
	def create_logger(self, name: str, console_format: str = "short") -> TelemetryLogger: ...

	@property
	def monitor(self) -> Monitor: ...


# ---------------------------------------------------------------------------
# Shared logger plumbing
# ---------------------------------------------------------------------------

class _LeveledLogger:
	"""
	Routes the six leveled methods into one _emit().
	"""

	def __init__(self, name: str) -> None:
		self.name = name

	def debug(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.DEBUG, message, attributes)

	def info(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.INFO, message, attributes)

	def notice(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.NOTICE, message, attributes)

	def warn(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.WARNING, message, attributes)

	def error(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.ERROR, message, attributes)

	def critical(self, message: str, attributes: Optional[Attributes] = None) -> None:
		self._emit(LogLevel.CRITICAL, message, attributes)

	def _emit(self, level: LogLevel, message: str, attributes: Optional[Attributes]) -> None:
		raise NotImplementedError


class _BaseTelemetryClient:
	"""
	State rules shared by the bundled clients.
	"""

	def __init__(self) -> None:
		self.client_token: Optional[str] = None
		self.env: Optional[str] = None
		self.service: Optional[str] = None
		self.site: Optional[str] = None
		self.application_id: Optional[str] = None
		self.long_task_threshold: Optional[float] = None

		self.logs_enabled = False
		self.monitoring_enabled = False
		self._monitor: Optional[Monitor] = None

	@property
	def initialized(self) -> bool:
		return self.client_token is not None

	def initialize(self, client_token: str, env: str, service: str, site: Optional[str] = None) -> None:
		if self.initialized:
			raise TelemetryStateError("telemetry client already initialized")
		if not client_token:
			raise TelemetryStateError("client_token must be a non-empty string")

		self.client_token = client_token
		self.env = env
		self.service = service
		self.site = site

	def enable_logs(self) -> None:
		self._require_initialized("enable_logs")
		self.logs_enabled = True

	def enable_monitoring(self, application_id: str, long_task_threshold: float) -> None:
		self._require_initialized("enable_monitoring")
		self.application_id = application_id
		self.long_task_threshold = float(long_task_threshold)
		self.monitoring_enabled = True
		self._monitor = self._make_monitor()

	def create_logger(self, name: str, console_format: str = "short") -> TelemetryLogger:
		self._require_initialized("create_logger")
		if not self.logs_enabled:
			raise TelemetryStateError("create_logger called before enable_logs")
		if console_format not in CONSOLE_FORMATS:
			raise ValueError(f"Unknown console_format: {console_format!r}")
		return self._make_logger(name, console_format)

	@property
	def monitor(self) -> Monitor:
		if self._monitor is None:
			raise TelemetryStateError("monitor used before enable_monitoring")
		return self._monitor

	def _require_initialized(self, op: str) -> None:
		if not self.initialized:
			raise TelemetryStateError(f"{op} called before initialize")

	def _make_logger(self, name: str, console_format: str) -> TelemetryLogger:
		raise NotImplementedError

	def _make_monitor(self) -> Monitor:
		raise NotImplementedError


# ---------------------------------------------------------------------------
# Null client
# ---------------------------------------------------------------------------

class _NullLogger(_LeveledLogger):
	def _emit(self, level: LogLevel, message: str, attributes: Optional[Attributes]) -> None:
		return


class _NullMonitor:
	def start_view(self, key: str, name: str, attributes: Optional[Attributes] = None) -> None:
		return

	def stop_view(self, key: str) -> None:
		return

	def add_action(self, type: str, name: str, attributes: Optional[Attributes] = None) -> None:
		return

	def add_error(self, error: BaseException, source: str, attributes: Optional[Attributes] = None) -> None:
		return


class NullTelemetryClient(_BaseTelemetryClient):
	"""
	No-op client. Still enforces call ordering.
	"""

	def _make_logger(self, name: str, console_format: str) -> TelemetryLogger:
		return _NullLogger(name)

	def _make_monitor(self) -> Monitor:
		return _NullMonitor()


# ---------------------------------------------------------------------------
# Log client
# ---------------------------------------------------------------------------

class _StdlibLogger(_LeveledLogger):
	def __init__(self, name: str, console_format: str, log: logging.Logger) -> None:
		super().__init__(name)
		self._format = console_format
		self._log = log

	def _emit(self, level: LogLevel, message: str, attributes: Optional[Attributes]) -> None:
		attrs = dict(attributes or {})
		if self._format == "json":
			payload = {"logger": self.name, "level": level.value, "message": message, "attributes": attrs}
			self._log.log(_STDLIB_LEVELS[level], "%s", json.dumps(payload, default=str))
			return
		self._log.log(_STDLIB_LEVELS[level], "[%s] %s %s", self.name, message, attrs)


class _StdlibMonitor:
	def __init__(self, log: logging.Logger) -> None:
		self._log = log

	def start_view(self, key: str, name: str, attributes: Optional[Attributes] = None) -> None:
		self._log.info("view.start key=%s name=%s attrs=%s", key, name, dict(attributes or {}))

	def stop_view(self, key: str) -> None:
		self._log.info("view.stop key=%s", key)

	def add_action(self, type: str, name: str, attributes: Optional[Attributes] = None) -> None:
		self._log.debug("action type=%s name=%s attrs=%s", type, name, dict(attributes or {}))

	def add_error(self, error: BaseException, source: str, attributes: Optional[Attributes] = None) -> None:
		self._log.warning(
			"error source=%s type=%s error=%s attrs=%s",
			source,
			type(error).__name__,
			error,
			dict(attributes or {}),
		)


class LogTelemetryClient(_BaseTelemetryClient):
	"""
	Client that emits logs and monitoring calls via Python logging.

	Log lines go to "<base>.logs", monitoring calls to "<base>.monitor".
	"""

	def __init__(self, base_logger: str = "pysimplylog.telemetry") -> None:
		super().__init__()
		self._base = base_logger

	def initialize(self, client_token: str, env: str, service: str, site: Optional[str] = None) -> None:
		super().initialize(client_token, env, service, site)
		logging.getLogger(self._base).info(
			"telemetry initialized env=%s service=%s site=%s",
			env,
			service,
			site,
		)

	def _make_logger(self, name: str, console_format: str) -> TelemetryLogger:
		return _StdlibLogger(name, console_format, logging.getLogger(f"{self._base}.logs"))

	def _make_monitor(self) -> Monitor:
		return _StdlibMonitor(logging.getLogger(f"{self._base}.monitor"))


# ---------------------------------------------------------------------------
# Memory client (tests / inspection)
# ---------------------------------------------------------------------------

class _MemoryLogger(_LeveledLogger):
	def __init__(self, name: str, client: "MemoryTelemetryClient") -> None:
		super().__init__(name)
		self._client = client

	def _emit(self, level: LogLevel, message: str, attributes: Optional[Attributes]) -> None:
		self._client.logs.append(
			LogEvent(message=message, level=level, attributes=attributes or {}, logger=self.name)
		)


class _MemoryMonitor:
	def __init__(self, client: "MemoryTelemetryClient") -> None:
		self._client = client

	def start_view(self, key: str, name: str, attributes: Optional[Attributes] = None) -> None:
		self._client.monitor_events.append(
			MonitorEvent(kind="view_start", key=key, name=name, attributes=attributes or {})
		)

	def stop_view(self, key: str) -> None:
		self._client.monitor_events.append(MonitorEvent(kind="view_stop", key=key))

	def add_action(self, type: str, name: str, attributes: Optional[Attributes] = None) -> None:
		attrs = dict(attributes or {})
		attrs.setdefault("action_type", type)
		self._client.monitor_events.append(MonitorEvent(kind="action", name=name, attributes=attrs))

	def add_error(self, error: BaseException, source: str, attributes: Optional[Attributes] = None) -> None:
		attrs = dict(attributes or {})
		attrs.setdefault("source", source)
		self._client.monitor_events.append(MonitorEvent(kind="error", attributes=attrs, error=error))


class MemoryTelemetryClient(_BaseTelemetryClient):
	"""
	In-memory client.

	Stores every log as a LogEvent and every monitoring call as a
	MonitorEvent for inspection.
	"""

	def __init__(self) -> None:
		super().__init__()
		self.logs: list[LogEvent] = []
		self.monitor_events: list[MonitorEvent] = []
		self.loggers_created: list[str] = []

	def _make_logger(self, name: str, console_format: str) -> TelemetryLogger:
		self.loggers_created.append(name)
		return _MemoryLogger(name, self)

	def _make_monitor(self) -> Monitor:
		return _MemoryMonitor(self)

	def logs_at(self, level: LogLevel) -> list[LogEvent]:
		return [ev for ev in self.logs if ev.level is level]

	def monitor_calls(self, kind: str) -> list[MonitorEvent]:
		return [ev for ev in self.monitor_events if ev.kind == kind]

	def clear(self) -> None:
		self.logs.clear()
		self.monitor_events.clear()


def build_client(name: str) -> TelemetryClient:
	"""
	Return a bundled client by name: "log", "memory" or "null".
	Unknown names fall back to the log client.
	"""
	if name == "memory":
		return MemoryTelemetryClient()
	if name == "null":
		return NullTelemetryClient()
	return LogTelemetryClient()
