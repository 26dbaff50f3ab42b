# ---------------------------------------------------------------------------
# File: logging_service.py
# ---------------------------------------------------------------------------
# Description:
#	LoggingService: the single place events are emitted to telemetry.
#
# Notes:
#	- Constructed explicitly and passed to consumers (App, EventGenerator,
#	  TrackedView). init_logging_service()/get_logging_service() provide the
#	  shared process-wide instance.
#	- initialize() runs once per instance (lock guarded). Telemetry is
#	  initialized before any telemetry logger is created.
#	- Every call is single-attempt; delivery is the client's concern.
#	- The on_log_sent observer receives one human-readable line per log.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# 10/11/2026	Paul G. LeDuc				log_error: isolate log + monitor failures
# 10/12/2026	Paul G. LeDuc				Explicit view keys on stop
# 10/15/2026	Paul G. LeDuc				Isolate observer failures; resumable initialize()
# ---------------------------------------------------------------------------

from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Callable, Optional

from pysimplylog.core.config import TelemetryConfig, load_config
from pysimplylog.core.errors import TelemetryStateError
from pysimplylog.core.logging import get_app_logger
from pysimplylog.core.models import Attributes, LogEvent, LogLevel
from pysimplylog.core.telemetry import LogTelemetryClient, TelemetryClient, TelemetryLogger


SENT_MARKER = "📤 Log Sent"
MESSAGE_SOURCE = "ui_scroll_view"
ACTION_MESSAGE_DISPLAYED = "message_displayed"
ACTION_TYPE_CUSTOM = "custom"
ERROR_SOURCE_CUSTOM = "custom"

LogSentCallback = Callable[[str], None]
Clock = Callable[[], float]

_log = get_app_logger("telemetry")


def format_clock(ts: float) -> str:
	"""
	Wall-clock time of an epoch timestamp as HH:MM:SS (local time).
	"""
	return datetime.fromtimestamp(ts).strftime("%H:%M:%S")


class LoggingService:
	"""
	LoggingService

	Owns one telemetry logger and mirrors each emission as a monitoring
	action (messages) or monitoring error (errors).
	"""

	def __init__(
		self,
		config: TelemetryConfig,
		client: TelemetryClient,
		*,
		clock: Clock = time.time,
	) -> None:
		self.config = config
		self.client = client
		self._clock = clock

		self._logger: Optional[TelemetryLogger] = None
		self._init_lock = threading.Lock()
		self._client_steps: set[str] = set()

		self.on_log_sent: Optional[LogSentCallback] = None

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	@property
	def initialized(self) -> bool:
		return self._logger is not None

	def initialize(self) -> TelemetryLogger:
		"""
		Configure the client and create the service logger.
		Repeat calls return the logger created by the first call. After a
		failed attempt, client steps that already succeeded are not repeated.
		"""
		with self._init_lock:
			if self._logger is not None:
				return self._logger

			cfg = self.config
			self._client_step(
				"initialize",
				lambda: self.client.initialize(cfg.client_token, cfg.environment, cfg.service, cfg.site),
			)
			self._client_step("enable_logs", self.client.enable_logs)
			self._client_step(
				"enable_monitoring",
				lambda: self.client.enable_monitoring(cfg.application_id, cfg.long_task_threshold),
			)

			logger = self.client.create_logger(cfg.service, console_format="short")
			logger.info(
				"Telemetry initialized and connected",
				{"service": cfg.service, "environment": cfg.environment},
			)

			self._logger = logger
			_log.info("Telemetry ready env=%s service=%s site=%s", cfg.environment, cfg.service, cfg.site)
			return logger

	def set_on_log_sent(self, cb: Optional[LogSentCallback]) -> None:
		"""
		Register (or clear) the observer notified after each log_message().
		"""
		self.on_log_sent = cb

	# -----------------------------------------------------------------------
	# Logging
	# -----------------------------------------------------------------------

	def log_message(self, message: str, level: LogLevel = LogLevel.INFO) -> LogEvent:
		logger = self._require_logger()
		now = self._clock()

		event = LogEvent(
			message=message,
			level=level,
			attributes={"source": MESSAGE_SOURCE, "timestamp": now},
		)

		getattr(logger, level.method_name)(event.message, dict(event.attributes))

		if self.on_log_sent is not None:
			try:
				self.on_log_sent(f"{SENT_MARKER} [{format_clock(now)}] - Level: {level.value}")
			except Exception:
				_log.exception("Log sent observer failed (level=%s)", level.value)

		self.client.monitor.add_action(
			ACTION_TYPE_CUSTOM,
			ACTION_MESSAGE_DISPLAYED,
			{"message": message, "level": level.value},
		)
		return event

	def log_error(self, error: BaseException, context: str) -> LogEvent:
		"""
		Report an application error as an error log plus a monitoring error.

		Both calls are attempted; a failure in one is written to the local
		log and does not stop the other. Nothing is raised to the caller.
		"""
		logger = self._require_logger()
		description = str(error) or type(error).__name__

		event = LogEvent(
			message=f"Error occurred: {description}",
			level=LogLevel.ERROR,
			attributes={
				"context": context,
				"error_type": type(error).__name__,
				"timestamp": self._clock(),
			},
		)

		try:
			logger.error(event.message, dict(event.attributes))
		except Exception:
			_log.exception("Telemetry error log failed (context=%s)", context)

		try:
			self.client.monitor.add_error(error, ERROR_SOURCE_CUSTOM, {"context": context})
		except Exception:
			_log.exception("Telemetry monitor error failed (context=%s)", context)

		return event

	# -----------------------------------------------------------------------
	# View tracking
	# -----------------------------------------------------------------------

	def start_view_tracking(self, name: str, attributes: Optional[Attributes] = None) -> None:
		self._require_logger()
		self.client.monitor.start_view(key=name, name=name, attributes=dict(attributes or {}))
		_log.debug("View started: %s", name)

	def stop_view_tracking(self, name: str) -> None:
		self._require_logger()
		self.client.monitor.stop_view(key=name)
		_log.debug("View stopped: %s", name)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _client_step(self, name: str, call: Callable[[], None]) -> None:
		if name in self._client_steps:
			return
		call()
		self._client_steps.add(name)

	def _require_logger(self) -> TelemetryLogger:
		if self._logger is None:
			raise TelemetryStateError("LoggingService used before initialize()")
		return self._logger

	def __repr__(self) -> str:
		return (
			f"<{self.__class__.__name__} service={self.config.service!r} "
			f"env={self.config.environment!r} initialized={self.initialized}>"
		)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_service: Optional[LoggingService] = None
_service_lock = threading.Lock()


def init_logging_service(
	config: TelemetryConfig,
	client: Optional[TelemetryClient] = None,
) -> LoggingService:
	"""
	Create and initialize the shared LoggingService.

	Only the first call constructs anything; later calls return the same
	instance and ignore their arguments.
	"""
	global _service

	with _service_lock:
		if _service is None:
			service = LoggingService(config, client or LogTelemetryClient())
			service.initialize()
			_service = service
		return _service


def get_logging_service() -> LoggingService:
	"""
	Return the shared LoggingService.

	When nothing has initialized it yet, it is built from the environment
	(load_config) with a LogTelemetryClient. ConfigError propagates.
	"""
	if _service is not None:
		return _service
	return init_logging_service(load_config())


def _reset_logging_service_for_tests() -> None:
	global _service
	with _service_lock:
		_service = None
