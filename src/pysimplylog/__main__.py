# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Entry point: python -m pysimplylog
#
# Notes:
#	- Telemetry configuration is loaded first; a missing required variable
#	  ends the process before logging is configured or a window exists.
#	- build_app() does all wiring between services and components.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pysimplylog.core.config import TelemetryConfig, load_config
from pysimplylog.core.errors import ConfigError
from pysimplylog.core.logging import get_app_logger, init_logging


MAIN_VIEW_NAME = "ContentView"


def load_or_exit(environ: Optional[Mapping[str, str]] = None) -> TelemetryConfig:
	"""
	Load telemetry config or terminate the process with a fatal message.
	"""
	try:
		return load_config(environ)
	except ConfigError as ex:
		raise SystemExit(f"pysimplylog: fatal configuration error: {ex}") from ex


def app_options(config: TelemetryConfig, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
	env = os.environ if environ is None else environ
	return {
		"log_level": config.verbosity,
		"log_file": env.get("PYSIMPLYLOG_LOG_FILE") or None,
		"theme": env.get("PYSIMPLYLOG_THEME") or "arc",
		"telemetry_client": env.get("PYSIMPLYLOG_TELEMETRY_CLIENT") or "log",
	}


def build_app(app: Any, service: Any) -> Any:
	"""
	Compose the window: tracked main view, status bar, generator, commands.

	Returns the EventGenerator driving the demo.
	"""
	from pysimplylog.app.default_commands import register_default_commands
	from pysimplylog.app.generator import EventGenerator
	from pysimplylog.app.keys import build_default_keymap
	from pysimplylog.services.transcript import TranscriptService
	from pysimplylog.ui.main_view import MainView
	from pysimplylog.ui.statusbar import StatusBar
	from pysimplylog.ui.view_tracker import track_view

	transcript = TranscriptService()
	generator = EventGenerator(service, app.scheduler, transcript=transcript)

	register_default_commands(app.commands, generator, quit_fn=app.shutdown)
	app.bind_keymap(build_default_keymap())

	view = MainView(on_toggle=lambda: app.invoke("generator.toggle"))
	status = StatusBar()

	def _on_log_sent(line: str) -> None:
		transcript.append(line)
		status.set_text("middle", line)

	service.set_on_log_sent(_on_log_sent)
	transcript.attach_sink(view.transcript)

	def _on_state(state: Any) -> None:
		view.controls.set_state(state)
		status.show_state(state)

	generator.set_on_state_change(_on_state)

	app.add_component(status)
	app.add_component(track_view(view, MAIN_VIEW_NAME, service))
	status.attach_logging(get_app_logger())

	app.add_shutdown_hook(generator.stop)
	app.add_shutdown_hook(lambda: status.detach_logging(get_app_logger()))
	return generator


def main() -> None:
	config = load_or_exit()
	options = app_options(config)

	init_logging(options)
	log = get_app_logger()
	log.info("Starting pysimplylog: %r", config)

	from pysimplylog.app.app import App
	from pysimplylog.core.telemetry import build_client
	from pysimplylog.services.logging_service import init_logging_service

	service = init_logging_service(config, build_client(options["telemetry_client"]))

	app = App(title="simply-swifty-logging", cfg=options)
	build_app(app, service)
	app.run()


if __name__ == "__main__":
	main()
