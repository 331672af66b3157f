"""
Line based detection of test functions that carry none of the excluded markers.

The source is never parsed. Class and test function headers are recognized by regular
expressions, decorator blocks are found by walking backward from a header, and class
markers are inherited by the methods indented below the class header.
"""

import re
from collections.abc import Iterable

from unmarked_tests.constants import TEST_FUNCTION_PREFIX
from unmarked_tests.decorators import scan_decorators
from unmarked_tests.scope import ClassScopeEntry, enclosing_scopes, update_class_scopes

CLASS_PATTERN = re.compile(r"^(\s*)class\s+(\w+)")
TEST_FUNCTION_PATTERN = re.compile(rf"^(\s*)def\s+({TEST_FUNCTION_PREFIX}\w+)\s*\(")


def split_lines(content: str) -> list[str]:
    """Split file content on newlines, dropping the carriage return of CRLF endings."""
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def is_excluded_by_class(scopes: list[ClassScopeEntry], indent: int, excluded_markers: set[str]) -> bool:
    return any(
        not scope.markers.isdisjoint(excluded_markers) for scope in enclosing_scopes(scopes=scopes, indent=indent)
    )


def analyze(content: str, excluded_markers: Iterable[str]) -> list[str]:
    """Find the test functions of a file that carry none of the excluded markers.

    A test is marked when one of the excluded markers is declared on the test itself or on
    a class enclosing it.

    Args:
        content: Source text of a Python file
        excluded_markers: Marker names that exclude a test from the result

    Returns:
        Names of unmarked test functions, in order of appearance
    """
    excluded = set(excluded_markers)
    lines = split_lines(content=content)
    class_scopes: list[ClassScopeEntry] = []
    unmarked_tests: list[str] = []

    for index, line in enumerate(lines):
        if class_match := CLASS_PATTERN.match(line):
            class_scopes = update_class_scopes(
                scopes=class_scopes,
                lines=lines,
                index=index,
                indent=len(class_match.group(1)),
            )
            continue

        if not (function_match := TEST_FUNCTION_PATTERN.match(line)):
            continue

        function_indent = len(function_match.group(1))
        if is_excluded_by_class(scopes=class_scopes, indent=function_indent, excluded_markers=excluded):
            continue

        if not scan_decorators(lines=lines, start_index=index).isdisjoint(excluded):
            continue

        unmarked_tests.append(function_match.group(2))

    return unmarked_tests
