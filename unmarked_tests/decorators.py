from collections.abc import Sequence

from unmarked_tests.constants import DECORATOR_SIGIL
from unmarked_tests.markers import extract_marker

DEPTH_DELTAS = {
    "(": (1, 0, 0),
    ")": (-1, 0, 0),
    "[": (0, 1, 0),
    "]": (0, -1, 0),
    "{": (0, 0, 1),
    "}": (0, 0, -1),
}


def _update_depths(depths: tuple[int, int, int], line: str) -> tuple[int, int, int]:
    paren_depth, bracket_depth, brace_depth = depths
    for char in line:
        if delta := DEPTH_DELTAS.get(char):
            paren_depth += delta[0]
            bracket_depth += delta[1]
            brace_depth += delta[2]
    return paren_depth, bracket_depth, brace_depth


def scan_decorators(lines: Sequence[str], start_index: int) -> set[str]:
    """Collect the markers declared by the decorator block above a definition.

    Walks backward from the line before `start_index`. Delimiter depths are counted on every
    non-blank line so the interior lines of a multi-line decorator call (e.g. a long
    `parametrize` argument list) do not end the block. The depths are never clamped and
    are only meaningful relative to the lines already walked.

    Args:
        lines: All lines of the scanned file
        start_index: Index of the class or function header line

    Returns:
        Set of marker names found on decorator lines of the block
    """
    markers: set[str] = set()
    depths = (0, 0, 0)

    for index in range(start_index - 1, -1, -1):
        stripped = lines[index].strip()
        if not stripped:
            continue

        depths = _update_depths(depths=depths, line=stripped)

        if stripped.startswith(DECORATOR_SIGIL):
            if marker := extract_marker(decorator_line=stripped):
                markers.add(marker)
        elif depths == (0, 0, 0):
            break

    return markers
