# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for pysimplylog tests.
#
# Notes:
#	- Headless: no Tk root is created anywhere in the suite.
#	- ManualScheduler replaces Tk after() with a virtual clock.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable

import pytest

from pysimplylog.core.config import TelemetryConfig
from pysimplylog.core.logging import _reset_logging_for_tests
from pysimplylog.core.telemetry import MemoryTelemetryClient
from pysimplylog.services.logging_service import LoggingService, _reset_logging_service_for_tests


FIXED_TS = 1_700_000_000.0


class ManualScheduler:
	"""
	Virtual-time scheduler. advance() runs due callbacks in time order.
	"""

	def __init__(self) -> None:
		self.now = 0.0
		self.delays: list[float] = []
		self._queue: dict[int, tuple[float, Callable[[], None]]] = {}
		self._next_handle = 1

	def call_later(self, delay: float, callback: Callable[[], None]) -> int:
		handle = self._next_handle
		self._next_handle += 1
		self.delays.append(delay)
		self._queue[handle] = (self.now + delay, callback)
		return handle

	def cancel(self, handle: int) -> None:
		self._queue.pop(handle, None)

	@property
	def pending_count(self) -> int:
		return len(self._queue)

	def pending_callbacks(self) -> list[Callable[[], None]]:
		return [cb for _due, cb in self._queue.values()]

	def advance(self, seconds: float) -> None:
		target = self.now + seconds
		while True:
			due = [(when, h) for h, (when, _cb) in self._queue.items() if when <= target]
			if not due:
				break
			when, handle = min(due)
			_when, cb = self._queue.pop(handle)
			self.now = when
			cb()
		self.now = target


@pytest.fixture
def fixed_ts() -> float:
	return FIXED_TS


@pytest.fixture
def scheduler() -> ManualScheduler:
	return ManualScheduler()


@pytest.fixture
def config() -> TelemetryConfig:
	return TelemetryConfig(client_token="test-token", application_id="test-app")


@pytest.fixture
def client() -> MemoryTelemetryClient:
	return MemoryTelemetryClient()


@pytest.fixture
def service(config: TelemetryConfig, client: MemoryTelemetryClient) -> LoggingService:
	svc = LoggingService(config, client, clock=lambda: FIXED_TS)
	svc.initialize()
	client.clear()
	return svc


@pytest.fixture(autouse=True)
def _reset_globals():
	yield
	_reset_logging_service_for_tests()
	_reset_logging_for_tests()
