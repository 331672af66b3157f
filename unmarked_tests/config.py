import argparse
import logging
from configparser import ConfigParser
from configparser import Error as ConfigParserError
from dataclasses import dataclass, field
from pathlib import Path

from unmarked_tests.constants import CONFIG_SECTION, DEFAULT_EXCLUDE_MARKERS, DEFAULT_TEST_DIR
from unmarked_tests.exceptions import ConfigFileError, EmptyListError

LOGGER = logging.getLogger(__name__)


@dataclass
class Settings:
    test_dir: Path = Path(DEFAULT_TEST_DIR)
    exclude_markers: frozenset[str] = DEFAULT_EXCLUDE_MARKERS
    packages: list[str] = field(default_factory=list)


def parse_comma_separated(value: str) -> list[str]:
    """Split a comma-separated list, e.g. "unit, slow" -> ["unit", "slow"].

    Raises:
        EmptyListError: If the value holds no names
    """
    names = [name.strip() for name in value.split(",") if name.strip()]
    if not names:
        raise EmptyListError(value=value)
    return names


def load_config(config_file: Path) -> dict[str, str]:
    """
    Read the DEFAULT section of an INI style config file.

    Eg:
        [DEFAULT]
        test_dir = tests
        exclude_markers = unit,integration
        packages = pkg_a/tests,pkg_b/tests

    Args:
        config_file (Path): config file path

    Returns:
        dict: config values, empty if the file does not exist

    Raises:
        ConfigFileError: If the file cannot be parsed
    """
    if not config_file.is_file():
        LOGGER.debug(f"Config file not found: {config_file}")
        return {}

    parser = ConfigParser()
    try:
        parser.read(config_file, encoding="utf-8")
        file_config = dict(parser.items(CONFIG_SECTION))
    except (ConfigParserError, UnicodeDecodeError) as exp:
        raise ConfigFileError(config_file=config_file, reason=exp) from exp

    LOGGER.info(f"Loaded config file: {config_file}")
    return file_config


def resolve_settings(args: argparse.Namespace, file_config: dict[str, str]) -> Settings:
    """Merge command line arguments, config file values and defaults, in that order of precedence.

    Raises:
        EmptyListError: If a config file list value holds no names
    """
    settings = Settings()

    if args.test_dir is not None:
        settings.test_dir = Path(args.test_dir)
    elif test_dir := file_config.get("test_dir"):
        settings.test_dir = Path(test_dir)

    if args.exclude_markers:
        settings.exclude_markers = frozenset(args.exclude_markers)
    elif "exclude_markers" in file_config:
        settings.exclude_markers = frozenset(parse_comma_separated(value=file_config["exclude_markers"]))

    if args.packages:
        settings.packages = list(args.packages)
    elif "packages" in file_config:
        settings.packages = parse_comma_separated(value=file_config["packages"])

    return settings
