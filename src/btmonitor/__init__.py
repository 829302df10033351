"""btmonitor - preference resolution for a bluetooth presence monitor."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("btmonitor")
except PackageNotFoundError:
    __version__ = "0+local"
from btmonitor.argv import ParseResult, parse_arguments
from btmonitor.cache import CacheInvalidator
from btmonitor.config import MonitorConfig
from btmonitor.configdir import validate_config_dir
from btmonitor.exceptions import MonitorConfigError, MonitorError
from btmonitor.preferences import PreferenceState, TriggerMode
from btmonitor.trigger import resolve_trigger_mode
from btmonitor.version import VersionStore

__all__ = [
    "__version__",
    "CacheInvalidator",
    "MonitorConfig",
    "MonitorConfigError",
    "MonitorError",
    "ParseResult",
    "PreferenceState",
    "TriggerMode",
    "VersionStore",
    "parse_arguments",
    "resolve_trigger_mode",
    "validate_config_dir",
]
