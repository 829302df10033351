"""Runtime configuration for btmonitor."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from btmonitor._constants import MANUFACTURER_CACHE_NAME, PUBLIC_NAME_CACHE_NAME, VERSION_FILE_NAME

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        return "INFO"
    return level


@dataclasses.dataclass(frozen=True)
class MonitorConfig:
    """Process configuration that does not come from command-line flags.

    Parameters
    ----------
    base_dir : Path
        Directory holding the version record and the scan caches.
    log_level : str
        Name of the root logging level (``"INFO"``, ``"DEBUG"``, ...).
    """

    base_dir: Path = dataclasses.field(default_factory=Path.cwd)
    log_level: str = "INFO"

    @property
    def version_file(self) -> Path:
        return self.base_dir / VERSION_FILE_NAME

    @property
    def manufacturer_cache(self) -> Path:
        return self.base_dir / MANUFACTURER_CACHE_NAME

    @property
    def public_name_cache(self) -> Path:
        return self.base_dir / PUBLIC_NAME_CACHE_NAME

    @classmethod
    def from_env(cls, **overrides: Any) -> MonitorConfig:
        """Create configuration from environment variables.

        Reads ``MONITOR_BASE_DIR``, ``MONITOR_LOG_LEVEL`` and
        ``MONITOR_DEBUG``. Explicit keyword arguments override environment
        values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_dir = env.get("MONITOR_BASE_DIR")
        if base_dir:
            config_kwargs["base_dir"] = Path(base_dir)

        level_env = env.get("MONITOR_LOG_LEVEL")
        if level_env is not None:
            config_kwargs["log_level"] = _normalize_log_level(level_env)

        # MONITOR_DEBUG wins over an explicit level from the environment
        if _env_bool(env.get("MONITOR_DEBUG"), False):
            config_kwargs["log_level"] = "DEBUG"

        if "base_dir" in overrides:
            overrides["base_dir"] = Path(overrides["base_dir"])
        if "log_level" in overrides:
            overrides["log_level"] = _normalize_log_level(overrides["log_level"])

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
