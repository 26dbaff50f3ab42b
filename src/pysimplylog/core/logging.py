# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Local diagnostic logging for pysimplylog (stdlib logging).
#
# Notes:
#	- This is the app's own console/file logging, separate from the
#	  telemetry logger that events are forwarded to.
#	- Safe to call before any UI exists (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys:
#	- "log_level"		(default: "INFO")
#	- "log_file"		(default: None; appended to, next to the console)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/12/2026	Paul G. LeDuc				Drop dotted cfg aliases; one key per option
# 10/15/2026	Paul G. LeDuc				Keep only the keys the app supplies
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "pysimplylog.app"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()				-> pysimplylog.app
		get_app_logger("generator")		-> pysimplylog.app.generator
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger.

	Safe to call repeatedly; handlers are rebuilt only when the resolved
	configuration changes.

	Args:
		cfg:
			Anything with get(key, default) (AppConfig, dict) or None.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = coerce_level(_cfg_get(cfg, "log_level", "INFO"))
	raw_file = _cfg_get(cfg, "log_file", None)
	log_file = str(raw_file) if raw_file else None

	signature: tuple[Any, ...] = (level, log_file)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(level=level, log_file=log_file)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


def coerce_level(level: Any) -> int:
	"""
	Convert "debug", "INFO", "20", 20 ... to a logging level int.
	Unknown values fall back to INFO.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	return default


def _configure_root_logger(
	*,
	level: int,
	log_file: str | None,
) -> None:
	"""
	Replace the handlers this module installed earlier with a fresh set.
	Handlers installed by others (pytest caplog, embedding apps) are left alone.
	"""
	root = logging.getLogger()
	root.setLevel(level)

	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	formatter = logging.Formatter(fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)

	ch = logging.StreamHandler()
	ch.setLevel(level)
	ch.setFormatter(formatter)
	_HANDLERS.append(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		_HANDLERS.append(fh)

	for h in _HANDLERS:
		root.addHandler(h)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove installed handlers and reset init state (unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	root = logging.getLogger()
	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
