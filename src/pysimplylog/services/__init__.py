# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pysimplylog.
#
#	Services are UI-agnostic capabilities shared by the generator, the
#	UI components and the app shell.
#
# Notes:
#	- Services should not depend directly on Tk widgets.
#	- __main__ is responsible for constructing and wiring service instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .logging_service import (
	LoggingService,
	get_logging_service,
	init_logging_service,
)
from .transcript import TranscriptService

__all__ = [
	"LoggingService",
	"TranscriptService",
	"get_logging_service",
	"init_logging_service",
]
