import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from unmarked_tests.analyzer import analyze
from unmarked_tests.constants import MAX_WORKERS, NODE_ID_SEPARATOR, PYTHON_FILE_SUFFIX
from unmarked_tests.exceptions import UnreadableFileError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnmarkedTest:
    """A test function that carries none of the excluded markers."""

    file_path: Path
    name: str

    @property
    def node_id(self) -> str:
        return f"{self.file_path}{NODE_ID_SEPARATOR}{self.name}"

    def __str__(self) -> str:
        return self.node_id


def get_python_files(test_dir: Path) -> list[Path]:
    if test_dir.is_file():
        return [test_dir] if test_dir.suffix == PYTHON_FILE_SUFFIX else []

    python_files = []
    for root, _, files in os.walk(test_dir):
        for filename in files:
            file_path = Path(root) / filename
            if file_path.suffix == PYTHON_FILE_SUFFIX:
                python_files.append(file_path)
    return sorted(python_files)


def read_source(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exp:
        raise UnreadableFileError(file_path=file_path, reason=exp) from exp


def analyze_file(file_path: Path, excluded_markers: frozenset[str]) -> list[UnmarkedTest]:
    """Analyze a single file, skipping it when it cannot be read.

    Args:
        file_path: Python file to analyze
        excluded_markers: Marker names that exclude a test from the result

    Returns:
        Unmarked tests of the file, in order of appearance
    """
    try:
        content = read_source(file_path=file_path)
    except UnreadableFileError as exp:
        LOGGER.debug(f"Skipping file: {exp}")
        return []

    return [
        UnmarkedTest(file_path=file_path, name=name)
        for name in analyze(content=content, excluded_markers=excluded_markers)
    ]


def collect_unmarked_tests(
    test_dir: Path,
    excluded_markers: Iterable[str],
    max_workers: int = MAX_WORKERS,
) -> list[UnmarkedTest]:
    """Collect the unmarked tests of every Python file under `test_dir`.

    Files are analyzed in parallel; the result is ordered by file path and then by the
    position of the test in its file.

    Args:
        test_dir: Root directory to scan
        excluded_markers: Marker names that exclude a test from the result
        max_workers: Maximum number of worker threads

    Returns:
        Unmarked tests found under `test_dir`
    """
    test_dir = Path(test_dir)
    if not test_dir.exists():
        LOGGER.warning(f"Test directory not found: {test_dir}")
        return []

    python_files = get_python_files(test_dir=test_dir)
    LOGGER.info(f"Scanning {len(python_files)} Python files under {test_dir}")

    excluded = frozenset(excluded_markers)
    unmarked_tests: list[UnmarkedTest] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for file_unmarked_tests in executor.map(partial(analyze_file, excluded_markers=excluded), python_files):
            unmarked_tests.extend(file_unmarked_tests)

    LOGGER.debug(f"Found {len(unmarked_tests)} unmarked tests under {test_dir}")
    return unmarked_tests


def collect_unmarked_tests_for_packages(
    packages: Iterable[str],
    excluded_markers: Iterable[str],
    max_workers: int = MAX_WORKERS,
) -> list[UnmarkedTest]:
    """Collect unmarked tests from each package directory, in the given order.

    Package directories that do not exist are skipped.
    """
    unmarked_tests: list[UnmarkedTest] = []
    for package in packages:
        package_dir = Path(package)
        if not package_dir.exists():
            LOGGER.info(f"Skipping missing package directory: {package_dir}")
            continue

        unmarked_tests.extend(
            collect_unmarked_tests(test_dir=package_dir, excluded_markers=excluded_markers, max_workers=max_workers)
        )
    return unmarked_tests
