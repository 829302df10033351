"""Validation of the alternate configuration directory (``-D``)."""

from __future__ import annotations

from pathlib import Path

from btmonitor.exceptions import MonitorConfigError


def validate_config_dir(path: str) -> str:
    """Return *path* unchanged if it names an existing directory.

    No normalisation is applied; the configuration loader that consumes
    the directory owns that. Raises :class:`MonitorConfigError` when the
    directory does not exist.
    """
    if not path or not Path(path).is_dir():
        raise MonitorConfigError(f"> error: configuration directory {path} does not exist", path=path)
    return path
