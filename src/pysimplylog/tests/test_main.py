# ---------------------------------------------------------------------------
# File: test_main.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the pysimplylog entry point and window wiring.
#
# Notes:
#	- build_app() is exercised against a fake App; no Tk root is created.
#	- Widgets are never built; components stay unmounted and the tracked
#	  view's hooks are driven directly.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

import pysimplylog.__main__ as entry
from pysimplylog.app.commands import CommandRegistry
from pysimplylog.core.models import RunState
from pysimplylog.ui.main_view import MainView
from pysimplylog.ui.statusbar import StatusBar
from pysimplylog.ui.view_tracker import TrackedView


class _FakeApp:
	def __init__(self, scheduler) -> None:
		self.commands = CommandRegistry()
		self.scheduler = scheduler
		self.keymaps: list = []
		self.components: list = []
		self.hooks: list = []
		self.closed = False

	def bind_keymap(self, keymap) -> None:
		self.keymaps.append(keymap)

	def add_component(self, component) -> None:
		self.components.append(component)

	def add_shutdown_hook(self, hook) -> None:
		self.hooks.append(hook)

	def invoke(self, command_id: str):
		return self.commands.invoke(command_id)

	def shutdown(self) -> None:
		for hook in self.hooks:
			hook()
		self.closed = True


@pytest.fixture
def wired(service, scheduler):
	app = _FakeApp(scheduler)
	generator = entry.build_app(app, service)
	yield app, generator
	if not app.closed:
		app.shutdown()


def _tracked(app) -> TrackedView:
	return next(c for c in app.components if isinstance(c, TrackedView))


def _status(app) -> StatusBar:
	return next(c for c in app.components if isinstance(c, StatusBar))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_load_or_exit_returns_config():
	cfg = entry.load_or_exit({"DATADOG_CLIENT_TOKEN": "t", "DATADOG_APPLICATION_ID": "a"})

	assert cfg.application_id == "a"


def test_load_or_exit_exits_on_missing_token():
	with pytest.raises(SystemExit) as info:
		entry.load_or_exit({"DATADOG_APPLICATION_ID": "a"})

	assert "fatal configuration error" in str(info.value.code)
	assert "DATADOG_CLIENT_TOKEN" in str(info.value.code)


def test_main_exits_before_logging_or_window(monkeypatch):
	monkeypatch.delenv("DATADOG_CLIENT_TOKEN", raising=False)
	monkeypatch.delenv("DATADOG_APPLICATION_ID", raising=False)
	calls: list[object] = []
	monkeypatch.setattr(entry, "init_logging", lambda cfg=None: calls.append(cfg))

	with pytest.raises(SystemExit):
		entry.main()

	assert calls == []


def test_app_options_from_environment(config):
	opts = entry.app_options(config, {
		"PYSIMPLYLOG_LOG_FILE": "/tmp/app.log",
		"PYSIMPLYLOG_THEME": "clam",
		"PYSIMPLYLOG_TELEMETRY_CLIENT": "null",
	})

	assert opts == {
		"log_level": "debug",
		"log_file": "/tmp/app.log",
		"theme": "clam",
		"telemetry_client": "null",
	}


def test_app_options_defaults(config):
	opts = entry.app_options(config, {})

	assert opts["log_file"] is None
	assert opts["theme"] == "arc"
	assert opts["telemetry_client"] == "log"


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def test_build_app_registers_commands_and_keys(wired):
	app, _gen = wired

	assert app.commands.has("generator.toggle")
	assert app.commands.has("app.quit")
	assert len(app.keymaps) == 1
	assert app.keymaps[0].resolve("<Control-t>") == "generator.toggle"


def test_build_app_tracks_main_view_as_content_view(wired, client):
	app, _gen = wired
	tracked = _tracked(app)

	assert tracked.tracking_name == "ContentView"
	assert isinstance(tracked.content, MainView)

	tracked.on_mount()
	tracked.on_unmount()

	assert [(e.kind, e.key) for e in client.monitor_events] == [
		("view_start", "ContentView"),
		("view_stop", "ContentView"),
	]


def test_button_toggle_runs_generator_and_updates_ui(wired, client):
	app, gen = wired
	view = _tracked(app).content
	status = _status(app)

	view.controls._clicked()

	assert gen.state is RunState.RUNNING
	assert view.controls.state is RunState.RUNNING
	assert status.text["left"] == "Running"
	assert client.logs[-1].message == "Starting."

	view.controls._clicked()

	assert gen.state is RunState.STOPPED
	assert status.text["left"] == "Stopped"


def test_log_sent_lines_reach_transcript_and_status(wired, scheduler):
	app, gen = wired
	view = _tracked(app).content
	status = _status(app)

	gen.start()
	scheduler.advance(5.0)
	gen.stop()

	pending = view.transcript._pending
	assert pending[0] == "Starting."
	assert any(line.startswith("Tick - [") for line in pending)
	assert any(line.startswith("📤 Log Sent [") for line in pending)
	assert pending[-1].startswith("📤 Log Sent [")
	assert status.text["middle"].endswith("Level: info")


def test_shutdown_hooks_stop_generator_and_detach_logging(wired, client):
	app, gen = wired
	status = _status(app)
	gen.start()

	app.shutdown()

	assert gen.state is RunState.STOPPED
	assert client.logs[-1].message == "Stopped."
	assert status.log_handler is None


def test_quit_command_uses_app_shutdown(wired):
	app, _gen = wired

	app.invoke("app.quit")

	assert app.closed is True
