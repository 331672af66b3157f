import os

# Markers
DEFAULT_EXCLUDE_MARKERS = frozenset({"unit", "integration", "component", "skip", "slow"})

# Scanning
DEFAULT_TEST_DIR = "tests"
PYTHON_FILE_SUFFIX = ".py"
TEST_FUNCTION_PREFIX = "test_"
DECORATOR_SIGIL = "@"

# Reporting
NODE_ID_SEPARATOR = "::"
NO_UNMARKED_TESTS_MESSAGE = "No unmarked tests found."

# Configuration
DEFAULT_CONFIG_FILE = "unmarked-tests.cfg"
CONFIG_SECTION = "DEFAULT"

# Parallelization settings
MAX_WORKERS = min(32, (os.cpu_count() or 1) + 4)

# Logging
PACKAGE_LOGGER_NAME = "unmarked_tests"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5
