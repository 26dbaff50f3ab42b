# ---------------------------------------------------------------------------
# File: generator.py
# ---------------------------------------------------------------------------
# Description:
#	EventGenerator: simulated application activity for the demo.
#
# Notes:
#	- Two streams while running:
#		- heartbeat: "Tick - [HH:MM:SS]" at debug, every 5 seconds
#		- random events: "Event: [<uuid>] - <text>" at info, each firing
#		  waits a fresh delay drawn from [1, 8) seconds
#	- start(): log "Starting.", then arm both streams.
#	- stop(): cancel both streams, then log "Stopped.".
#	- Streams re-check their cancelled flag before emitting; nothing is
#	  logged by a stream once cancel() has run.
#	- A failed emission is logged locally; the stream stays armed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/11/2026	Paul G. LeDuc				Initial coding / release
# 10/12/2026	Paul G. LeDuc				Replace nested rescheduling with TimerStream
# 10/13/2026	Paul G. LeDuc				Add toggle() + state change callback
# 10/15/2026	Paul G. LeDuc				Keep streams armed when an emission raises
# ---------------------------------------------------------------------------

from __future__ import annotations

import math
import random
import uuid
from datetime import datetime
from typing import Any, Callable, Optional

from pysimplylog.app.scheduler import Scheduler
from pysimplylog.core.logging import get_app_logger
from pysimplylog.core.models import LogLevel, RunState
from pysimplylog.services.logging_service import LoggingService
from pysimplylog.services.transcript import TranscriptService


HEARTBEAT_INTERVAL = 5.0
MIN_EVENT_DELAY = 1.0
MAX_EVENT_DELAY = 8.0

EVENT_TEMPLATES: tuple[str, ...] = (
	"Working.",
	"Operational deviation.",
	"Shifted.",
	"Work Completed - %s",
)

MSG_STARTING = "Starting."
MSG_STOPPED = "Stopped."

StateCallback = Callable[[RunState], None]

_log = get_app_logger("generator")


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------

class TimerStream:
	"""
	A cancellable, self-rearming timer.

	Each firing: check the cancelled flag, emit, then arm again with the
	next delay. At most one pending handle exists at a time.
	"""

	def __init__(
		self,
		name: str,
		scheduler: Scheduler,
		next_delay: Callable[[], float],
		emit: Callable[[], None],
	) -> None:
		self.name = name
		self._scheduler = scheduler
		self._next_delay = next_delay
		self._emit = emit

		self._active = False
		self._handle: Any = None

	@property
	def active(self) -> bool:
		return self._active

	@property
	def pending(self) -> bool:
		return self._handle is not None

	def start(self) -> None:
		if self._active:
			return
		self._active = True
		self._arm()

	def cancel(self) -> None:
		self._active = False
		handle, self._handle = self._handle, None
		if handle is not None:
			self._scheduler.cancel(handle)

	def _arm(self) -> None:
		delay = self._next_delay()
		self._handle = self._scheduler.call_later(delay, self._fire)

	def _fire(self) -> None:
		self._handle = None
		if not self._active:
			return

		try:
			self._emit()
		except Exception:
			_log.exception("%s stream emission failed", self.name)

		# emit() may have stopped the generator
		if self._active:
			self._arm()


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class EventGenerator:
	"""
	EventGenerator

	Idle <-> Running state machine driving the heartbeat and random-event
	streams. Owned by the UI thread; all callbacks arrive via the scheduler.
	"""

	def __init__(
		self,
		service: LoggingService,
		scheduler: Scheduler,
		*,
		transcript: Optional[TranscriptService] = None,
		rng: Optional[random.Random] = None,
		heartbeat_interval: float = HEARTBEAT_INTERVAL,
		min_delay: float = MIN_EVENT_DELAY,
		max_delay: float = MAX_EVENT_DELAY,
		templates: tuple[str, ...] = EVENT_TEMPLATES,
		id_factory: Callable[[], Any] = uuid.uuid4,
		clock: Callable[[], datetime] = datetime.now,
	) -> None:
		if heartbeat_interval <= 0:
			raise ValueError("heartbeat_interval must be positive")
		if not 0 < min_delay < max_delay:
			raise ValueError("expected 0 < min_delay < max_delay")
		if not templates:
			raise ValueError("templates must not be empty")

		self.service = service
		self.transcript = transcript

		self._rng = rng or random.Random()
		self._templates = templates
		self._id_factory = id_factory
		self._clock = clock

		self.heartbeat_interval = float(heartbeat_interval)
		self.min_delay = float(min_delay)
		self.max_delay = float(max_delay)

		self._state = RunState.STOPPED
		self.on_state_change: Optional[StateCallback] = None

		self.heartbeat = TimerStream("heartbeat", scheduler, lambda: self.heartbeat_interval, self._emit_heartbeat)
		self.events = TimerStream("events", scheduler, self.sample_delay, self._emit_random_event)

	# -----------------------------------------------------------------------
	# State
	# -----------------------------------------------------------------------

	@property
	def state(self) -> RunState:
		return self._state

	@property
	def running(self) -> bool:
		return self._state is RunState.RUNNING

	def set_on_state_change(self, cb: Optional[StateCallback]) -> None:
		self.on_state_change = cb
		if cb:
			cb(self._state)

	def start(self) -> None:
		if self.running:
			return

		self._set_state(RunState.RUNNING)
		self._publish(MSG_STARTING, LogLevel.INFO)
		self.heartbeat.start()
		self.events.start()
		_log.info("Generator started")

	def stop(self) -> None:
		if not self.running:
			return

		self.heartbeat.cancel()
		self.events.cancel()
		self._set_state(RunState.STOPPED)
		self._publish(MSG_STOPPED, LogLevel.INFO)
		_log.info("Generator stopped")

	def toggle(self) -> RunState:
		if self.running:
			self.stop()
		else:
			self.start()
		return self._state

	# -----------------------------------------------------------------------
	# Sampling / formatting
	# -----------------------------------------------------------------------

	def sample_delay(self) -> float:
		"""
		Uniform delay in [min_delay, max_delay).
		"""
		delay = self.min_delay + (self.max_delay - self.min_delay) * self._rng.random()
		# Float rounding can land exactly on max_delay.
		if delay >= self.max_delay:
			delay = math.nextafter(self.max_delay, self.min_delay)
		return delay

	def make_event_message(self) -> str:
		template = self._rng.choice(self._templates)
		text = template % self._timestamp() if "%s" in template else template
		return f"Event: [{self._new_id()}] - {text}"

	def make_heartbeat_message(self) -> str:
		return f"Tick - [{self._timestamp()}]"

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _emit_heartbeat(self) -> None:
		self._publish(self.make_heartbeat_message(), LogLevel.DEBUG)

	def _emit_random_event(self) -> None:
		self._publish(self.make_event_message(), LogLevel.INFO)

	def _publish(self, message: str, level: LogLevel) -> None:
		if self.transcript is not None:
			self.transcript.append(message)
		self.service.log_message(message, level)

	def _set_state(self, state: RunState) -> None:
		self._state = state
		if self.on_state_change:
			self.on_state_change(state)

	def _timestamp(self) -> str:
		return self._clock().strftime("%H:%M:%S")

	def _new_id(self) -> str:
		return str(self._id_factory()).upper()
