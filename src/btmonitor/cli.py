"""Process entry point: resolve preferences and hand them to the engine."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from btmonitor import __version__
from btmonitor._constants import EXIT_OK
from btmonitor._redact import enable_log_redaction, redact_for_log
from btmonitor.argv import resolve_invocation, tokenize
from btmonitor.config import MonitorConfig
from btmonitor.preferences import PreferenceState
from btmonitor.version import VersionStore

_logger = logging.getLogger(__name__)

Engine = Callable[[PreferenceState, tuple[str, ...]], int]
"""Scanning/reporting engine: receives read-only preferences and positional arguments."""


def run(
    argv: Sequence[str],
    *,
    config: MonitorConfig,
    engine: Engine | None = None,
) -> int:
    """Resolve *argv* and run *engine*, returning the process exit code.

    The version record is only consulted when neither help nor version was
    requested, so those never touch the disk.
    """
    invocation = tokenize(argv)
    if invocation.terminal_flag is None:
        VersionStore(config.version_file).report_and_maybe_update(__version__)

    result = resolve_invocation(invocation, config=config)
    if result.preferences is None:
        return result.exit_code if result.exit_code is not None else EXIT_OK

    preferences = result.preferences
    if preferences.redact_logs:
        enable_log_redaction()
    _logger.debug("> resolved preferences: %s", redact_for_log(preferences.model_dump()))

    if engine is None:
        return EXIT_OK
    return engine(preferences, result.positional)


def main(argv: Sequence[str] | None = None) -> int:
    config = MonitorConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(message)s")
    return run(sys.argv[1:] if argv is None else argv, config=config)
