"""Pytest configuration for unmarked_tests unit tests"""

import logging
import textwrap

import pytest

from unmarked_tests.constants import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so tests don't leak into each other"""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    original_propagate = package_logger.propagate

    yield

    package_logger.handlers = original_handlers
    package_logger.setLevel(level=original_level)
    package_logger.propagate = original_propagate


@pytest.fixture
def write_test_file(tmp_path):
    """Write dedented source text to a file below tmp_path"""

    def _write_test_file(relative_path, content):
        file_path = tmp_path / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(textwrap.dedent(content), encoding="utf-8")
        return file_path

    return _write_test_file

