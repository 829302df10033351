"""Removal of the on-disk scan caches (``-c``)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from btmonitor.config import MonitorConfig

_logger = logging.getLogger(__name__)


class CacheInvalidator:
    """Delete cache files so the scanning engine rebuilds them on next run."""

    def __init__(self, paths: Iterable[Path]) -> None:
        self._paths: tuple[Path, ...] = tuple(paths)

    @classmethod
    def from_config(cls, config: MonitorConfig) -> CacheInvalidator:
        return cls((config.manufacturer_cache, config.public_name_cache))

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._paths

    def clean(self) -> None:
        # Each removal is independent; one failure must not skip the others.
        for path in self._paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                _logger.warning("> could not remove cache %s: %s", path, exc)
        _logger.info("> cache cleaned")
