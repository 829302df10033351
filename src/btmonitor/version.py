"""Persistence of the last-run version and start-up version reporting."""

from __future__ import annotations

import logging
from pathlib import Path

from btmonitor._constants import PROGRAM_NAME

_logger = logging.getLogger(__name__)

_UNKNOWN_VERSION = "Unknown"


class VersionStore:
    """Single-slot store for the version string of the previous run.

    The file holds one line. A missing or unreadable file is treated as
    "never persisted". Write failures are reported but never raised: the
    record is advisory and must not stop the daemon from starting.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return ""
        except OSError as exc:
            _logger.warning("> could not read version record %s: %s", self._path, exc)
            return ""

    def save(self, version: str) -> None:
        try:
            self._path.write_text(f"{version}\n", encoding="utf-8")
        except OSError as exc:
            _logger.warning("> could not write version record %s: %s", self._path, exc)

    def report_and_maybe_update(self, current_version: str) -> bool:
        """Log the start-up line and persist *current_version* if it changed.

        Returns ``True`` when an update from a different version was recorded.
        """
        previous = self.load()
        if previous == current_version:
            _logger.info("> starting %s (v. %s)", PROGRAM_NAME, current_version)
            return False

        _logger.info(
            "> %s updated from %s to %s",
            PROGRAM_NAME,
            previous or _UNKNOWN_VERSION,
            current_version,
        )
        self.save(current_version)
        return True
