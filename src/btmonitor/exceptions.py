"""Custom exception hierarchy for btmonitor."""

from __future__ import annotations

from btmonitor._constants import EXIT_MISSING_CONFIG_DIR


class MonitorError(Exception):
    """Base exception for all btmonitor errors."""


class MonitorConfigError(MonitorError):
    """Invalid configuration supplied on the command line.

    Carries the process exit code the entry point should terminate with.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        exit_code: int = EXIT_MISSING_CONFIG_DIR,
    ) -> None:
        self.path = path
        self.exit_code = exit_code
        super().__init__(message)
