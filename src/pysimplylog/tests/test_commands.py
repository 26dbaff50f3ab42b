# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for pysimplylog command registry.
#
# Notes:
#   - Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

import pytest

from pysimplylog.app.commands import Command, CommandRegistry


def test_register_and_get_command():
	registry = CommandRegistry()

	cmd = Command(id="generator.toggle", label="Start/Stop", handler=lambda: "ok")

	registry.register(cmd)

	assert registry.has("generator.toggle") is True
	assert registry.get("generator.toggle") is cmd
	assert registry.ids() == ["generator.toggle"]


def test_get_unknown_returns_none():
	assert CommandRegistry().get("missing") is None


def test_register_duplicate_id_raises():
	registry = CommandRegistry()

	registry.register(Command(id="x", handler=lambda: 1))

	with pytest.raises(ValueError):
		registry.register(Command(id="x", handler=lambda: 2))


def test_register_empty_id_raises():
	with pytest.raises(ValueError):
		CommandRegistry().register(Command(id="", handler=lambda: None))


def test_invoke_calls_handler():
	registry = CommandRegistry()
	calls: list[str] = []

	def handler():
		calls.append("called")
		return 123

	registry.register(Command(id="do", handler=handler))

	assert registry.invoke("do") == 123
	assert calls == ["called"]


def test_invoke_unknown_command_raises_key_error():
	with pytest.raises(KeyError):
		CommandRegistry().invoke("missing")


def test_invoke_enabled_fn_controls_enablement():
	registry = CommandRegistry()

	allow = False
	called = False

	def handler():
		nonlocal called
		called = True
		return "ran"

	registry.register(Command(id="dynamic", handler=handler, enabled_fn=lambda: allow))

	# not enabled
	assert registry.invoke("dynamic") is None
	assert called is False

	# enabled
	allow = True
	assert registry.invoke("dynamic") == "ran"
	assert called is True
