# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Telemetry configuration loaded from the process environment.
#
# Notes:
#	- Resolved once at startup; TelemetryConfig is immutable.
#	- Missing required variables raise ConfigError (fatal in __main__).
#	- Empty strings count as missing.
#
#	Variables:
#	- DATADOG_CLIENT_TOKEN			(required, secret)
#	- DATADOG_APPLICATION_ID		(required)
#	- DATADOG_ENVIRONMENT			(default: "development")
#	- DATADOG_SERVICE				(default: "simply-swifty-logging")
#	- DATADOG_SITE					(default: "us5")
#	- DATADOG_VERBOSITY				(default: "debug")
#	- DATADOG_LONG_TASK_THRESHOLD	(default: 0.1 seconds)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# 10/11/2026	Paul G. LeDuc				Add site, verbosity, long task threshold
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional
import os

from .errors import ConfigError


ENV_CLIENT_TOKEN = "DATADOG_CLIENT_TOKEN"
ENV_APPLICATION_ID = "DATADOG_APPLICATION_ID"
ENV_ENVIRONMENT = "DATADOG_ENVIRONMENT"
ENV_SERVICE = "DATADOG_SERVICE"
ENV_SITE = "DATADOG_SITE"
ENV_VERBOSITY = "DATADOG_VERBOSITY"
ENV_LONG_TASK_THRESHOLD = "DATADOG_LONG_TASK_THRESHOLD"

DEFAULT_ENVIRONMENT = "development"
DEFAULT_SERVICE = "simply-swifty-logging"
DEFAULT_SITE = "us5"
DEFAULT_VERBOSITY = "debug"
DEFAULT_LONG_TASK_THRESHOLD = 0.1

_VERBOSITY_NAMES = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class TelemetryConfig:
	"""
	Telemetry settings.

	client_token is excluded from repr so it never lands in logs.
	"""
	client_token: str = field(repr=False)
	application_id: str
	environment: str = DEFAULT_ENVIRONMENT
	service: str = DEFAULT_SERVICE
	site: str = DEFAULT_SITE
	verbosity: str = DEFAULT_VERBOSITY
	long_task_threshold: float = DEFAULT_LONG_TASK_THRESHOLD


def load_config(environ: Optional[Mapping[str, str]] = None) -> TelemetryConfig:
	"""
	Build a TelemetryConfig from environment variables.

	Raises:
		ConfigError: a required variable is missing or a value is malformed.
	"""
	env = os.environ if environ is None else environ

	return TelemetryConfig(
		client_token=_required(env, ENV_CLIENT_TOKEN),
		application_id=_required(env, ENV_APPLICATION_ID),
		environment=_optional(env, ENV_ENVIRONMENT, DEFAULT_ENVIRONMENT),
		service=_optional(env, ENV_SERVICE, DEFAULT_SERVICE),
		site=_optional(env, ENV_SITE, DEFAULT_SITE),
		verbosity=_verbosity(env),
		long_task_threshold=_threshold(env),
	)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _required(env: Mapping[str, str], name: str) -> str:
	value = (env.get(name) or "").strip()
	if not value:
		raise ConfigError(f"{name} environment variable is not set", variable=name)
	return value


def _optional(env: Mapping[str, str], name: str, default: str) -> str:
	value = (env.get(name) or "").strip()
	return value or default


def _verbosity(env: Mapping[str, str]) -> str:
	value = _optional(env, ENV_VERBOSITY, DEFAULT_VERBOSITY).lower()
	if value not in _VERBOSITY_NAMES:
		raise ConfigError(
			f"{ENV_VERBOSITY} must be one of {', '.join(_VERBOSITY_NAMES)} (got {value!r})",
			variable=ENV_VERBOSITY,
		)
	return value


def _threshold(env: Mapping[str, str]) -> float:
	raw = (env.get(ENV_LONG_TASK_THRESHOLD) or "").strip()
	if not raw:
		return DEFAULT_LONG_TASK_THRESHOLD

	try:
		value = float(raw)
	except ValueError as ex:
		raise ConfigError(
			f"{ENV_LONG_TASK_THRESHOLD} must be a number of seconds (got {raw!r})",
			variable=ENV_LONG_TASK_THRESHOLD,
		) from ex

	if value <= 0.0:
		raise ConfigError(
			f"{ENV_LONG_TASK_THRESHOLD} must be positive (got {raw!r})",
			variable=ENV_LONG_TASK_THRESHOLD,
		)
	return value
