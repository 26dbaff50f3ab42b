# ---------------------------------------------------------------------------
# File: test_logging_service.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pysimplylog.services.logging_service.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemoryTelemetryClient for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import threading

import pytest

from pysimplylog.core.errors import ConfigError, TelemetryStateError
from pysimplylog.core.models import LogLevel
from pysimplylog.core.telemetry import LogTelemetryClient, MemoryTelemetryClient
from pysimplylog.services.logging_service import (
	LoggingService,
	format_clock,
	get_logging_service,
	init_logging_service,
)


class _ExplodingLogger:
	def __getattr__(self, name):
		def _boom(*args, **kwargs):
			raise RuntimeError(f"logger.{name} failed")
		return _boom


class _ExplodingMonitor:
	def __getattr__(self, name):
		def _boom(*args, **kwargs):
			raise RuntimeError(f"monitor.{name} failed")
		return _boom


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------

def test_initialize_configures_client_then_creates_logger(config):
	client = MemoryTelemetryClient()
	svc = LoggingService(config, client)

	assert svc.initialized is False

	svc.initialize()

	assert svc.initialized is True
	assert client.client_token == "test-token"
	assert client.env == "development"
	assert client.service == "simply-swifty-logging"
	assert client.site == "us5"
	assert client.logs_enabled is True
	assert client.monitoring_enabled is True
	assert client.application_id == "test-app"
	assert client.long_task_threshold == pytest.approx(0.1)
	assert client.loggers_created == ["simply-swifty-logging"]


def test_initialize_sends_connected_log(config):
	client = MemoryTelemetryClient()
	LoggingService(config, client).initialize()

	assert len(client.logs) == 1
	ev = client.logs[0]
	assert ev.level is LogLevel.INFO
	assert "initialized" in ev.message
	assert ev.attributes == {"service": "simply-swifty-logging", "environment": "development"}


def test_initialize_twice_creates_one_logger(config):
	client = MemoryTelemetryClient()
	svc = LoggingService(config, client)

	first = svc.initialize()
	second = svc.initialize()

	assert first is second
	assert client.loggers_created == ["simply-swifty-logging"]


def test_initialize_retry_skips_completed_client_steps(config):
	class _FlakyClient(MemoryTelemetryClient):
		def __init__(self) -> None:
			super().__init__()
			self.failures = 1

		def create_logger(self, name, console_format="short"):
			if self.failures:
				self.failures -= 1
				raise RuntimeError("backend unavailable")
			return super().create_logger(name, console_format)

	client = _FlakyClient()
	svc = LoggingService(config, client)

	with pytest.raises(RuntimeError):
		svc.initialize()
	assert svc.initialized is False

	svc.initialize()

	assert svc.initialized is True
	assert client.loggers_created == ["simply-swifty-logging"]


def test_use_before_initialize_raises(config):
	svc = LoggingService(config, MemoryTelemetryClient())

	with pytest.raises(TelemetryStateError):
		svc.log_message("hello")

	with pytest.raises(TelemetryStateError):
		svc.start_view_tracking("ContentView")


# ---------------------------------------------------------------------------
# log_message
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("level", list(LogLevel))
def test_log_message_dispatches_matching_level_and_notifies_once(service, client, level):
	lines: list[str] = []
	service.set_on_log_sent(lines.append)

	service.log_message("hello", level)

	assert len(client.logs) == 1
	assert client.logs[0].level is level
	assert client.logs[0].message == "hello"

	assert len(lines) == 1
	assert f"Level: {level.value}" in lines[0]


def test_log_message_defaults_to_info(service, client):
	service.log_message("hello")

	assert client.logs[0].level is LogLevel.INFO


def test_log_message_attributes(service, client, fixed_ts):
	event = service.log_message("hello", LogLevel.NOTICE)

	attrs = client.logs[0].attributes
	assert attrs == {"source": "ui_scroll_view", "timestamp": fixed_ts}
	assert event.attributes == attrs


def test_log_message_observer_line_format(service, fixed_ts):
	lines: list[str] = []
	service.set_on_log_sent(lines.append)

	service.log_message("hello", LogLevel.WARNING)

	assert lines == [f"📤 Log Sent [{format_clock(fixed_ts)}] - Level: warning"]


def test_log_message_records_displayed_action(service, client):
	service.log_message("hello", LogLevel.DEBUG)

	actions = client.monitor_calls("action")
	assert len(actions) == 1
	assert actions[0].name == "message_displayed"
	assert actions[0].attributes["message"] == "hello"
	assert actions[0].attributes["level"] == "debug"
	assert actions[0].attributes["action_type"] == "custom"


def test_log_message_records_action_when_observer_fails(service, client, caplog):
	def _broken(_line: str) -> None:
		raise RuntimeError("observer broke")

	service.set_on_log_sent(_broken)

	event = service.log_message("hello")

	assert event.message == "hello"
	assert len(client.logs) == 1
	assert len(client.monitor_calls("action")) == 1
	assert "Log sent observer failed" in caplog.text


def test_log_message_without_observer(service, client):
	service.set_on_log_sent(None)

	service.log_message("quiet")

	assert len(client.logs) == 1


# ---------------------------------------------------------------------------
# log_error
# ---------------------------------------------------------------------------

def test_log_error_emits_error_log_and_monitor_error(service, client, fixed_ts):
	err = ValueError("bad input")

	event = service.log_error(err, "ctx")

	errors = client.logs_at(LogLevel.ERROR)
	assert len(client.logs) == 1
	assert len(errors) == 1
	assert errors[0].message == "Error occurred: bad input"
	assert errors[0].attributes["context"] == "ctx"
	assert errors[0].attributes["error_type"] == "ValueError"
	assert errors[0].attributes["timestamp"] == fixed_ts
	assert event.message == errors[0].message

	monitor_errors = client.monitor_calls("error")
	assert len(monitor_errors) == 1
	assert monitor_errors[0].error is err
	assert monitor_errors[0].attributes["context"] == "ctx"
	assert monitor_errors[0].attributes["source"] == "custom"


def test_log_error_empty_message_uses_type_name(service, client):
	service.log_error(KeyError(), "lookup")

	assert client.logs[0].message.startswith("Error occurred: ")
	assert client.logs[0].message != "Error occurred: "


def test_log_error_does_not_notify_observer(service):
	lines: list[str] = []
	service.set_on_log_sent(lines.append)

	service.log_error(RuntimeError("x"), "ctx")

	assert lines == []


def test_log_error_monitor_runs_when_logger_fails(service, client, caplog):
	service._logger = _ExplodingLogger()

	service.log_error(RuntimeError("boom"), "ctx")

	assert len(client.monitor_calls("error")) == 1
	assert "Telemetry error log failed" in caplog.text


def test_log_error_log_runs_when_monitor_fails(service, client, caplog, monkeypatch):
	monkeypatch.setattr(client, "_monitor", _ExplodingMonitor())

	service.log_error(RuntimeError("boom"), "ctx")

	assert len(client.logs_at(LogLevel.ERROR)) == 1
	assert "Telemetry monitor error failed" in caplog.text


# ---------------------------------------------------------------------------
# View tracking
# ---------------------------------------------------------------------------

def test_view_tracking_uses_explicit_keys(service, client):
	service.start_view_tracking("ContentView")
	service.stop_view_tracking("ContentView")

	starts = client.monitor_calls("view_start")
	stops = client.monitor_calls("view_stop")

	assert [(e.key, e.name) for e in starts] == [("ContentView", "ContentView")]
	assert [e.key for e in stops] == ["ContentView"]


# ---------------------------------------------------------------------------
# Shared instance
# ---------------------------------------------------------------------------

def test_init_logging_service_returns_same_instance(config):
	first = init_logging_service(config, MemoryTelemetryClient())
	second = init_logging_service(config, MemoryTelemetryClient())

	assert first is second
	assert get_logging_service() is first


def test_init_logging_service_defaults_to_log_client(config):
	svc = init_logging_service(config)

	assert isinstance(svc.client, LogTelemetryClient)
	assert svc.initialized


def test_init_logging_service_is_thread_safe(config):
	results: list[LoggingService] = []
	lock = threading.Lock()

	def _worker() -> None:
		svc = init_logging_service(config, MemoryTelemetryClient())
		with lock:
			results.append(svc)

	threads = [threading.Thread(target=_worker) for _ in range(8)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()

	assert len(results) == 8
	assert all(r is results[0] for r in results)


def test_get_logging_service_builds_from_environment(monkeypatch):
	monkeypatch.setenv("DATADOG_CLIENT_TOKEN", "env-token")
	monkeypatch.setenv("DATADOG_APPLICATION_ID", "env-app")
	monkeypatch.setenv("DATADOG_SERVICE", "env-service")

	svc = get_logging_service()

	assert svc.config.service == "env-service"
	assert svc.initialized
	assert get_logging_service() is svc


def test_get_logging_service_missing_token_raises(monkeypatch):
	monkeypatch.delenv("DATADOG_CLIENT_TOKEN", raising=False)
	monkeypatch.setenv("DATADOG_APPLICATION_ID", "env-app")

	with pytest.raises(ConfigError):
		get_logging_service()
