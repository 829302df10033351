"""Internal constants shared across the package."""

PROGRAM_NAME = "btmonitor"

# Files kept in the base directory.
VERSION_FILE_NAME = ".previous_version"
MANUFACTURER_CACHE_NAME = ".manufacturer_cache"
PUBLIC_NAME_CACHE_NAME = ".public_name_cache"

# ------------------------------------------------------------------
# Exit codes
# ------------------------------------------------------------------

EXIT_OK = 0
EXIT_MISSING_CONFIG_DIR = 1

# ------------------------------------------------------------------
# Command-line flags
# ------------------------------------------------------------------

OPTION_TERMINATOR = "--"

HELP_FLAG = "h"
VERSION_FLAG = "v"
CLEAN_CACHES_FLAG = "c"
TRIGGER_FLAG = "t"
CONFIG_DIR_FLAG = "D"

TERMINAL_FLAGS: frozenset[str] = frozenset({HELP_FLAG, VERSION_FLAG})
FLAGS_WITH_ARGUMENT: frozenset[str] = frozenset({TRIGGER_FLAG, CONFIG_DIR_FLAG})

# Trigger mode characters.
TRIGGER_ARRIVE = "a"
TRIGGER_DEPART = "d"
TRIGGER_REPORT_OUT = "r"
