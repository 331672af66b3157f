import re

from unmarked_tests.constants import DECORATOR_SIGIL

# Matches both "@pytest.mark.<name>" and the bare "@<name>" form
MARKER_PATTERN = re.compile(rf"{DECORATOR_SIGIL}(?:pytest\.mark\.)?(\w+)")


def extract_marker(decorator_line: str) -> str | None:
    """Extract the marker name declared by a decorator line.

    Args:
        decorator_line: Stripped source line starting with "@"

    Returns:
        The first identifier following the sigil (and the optional "pytest.mark." prefix),
        or None if no identifier follows it.

    Examples:
        >>> extract_marker("@pytest.mark.unit")
        'unit'
        >>> extract_marker("@slow")
        'slow'
        >>> extract_marker("@pytest.mark.parametrize('x', [1, 2])")
        'parametrize'
    """
    match = MARKER_PATTERN.search(decorator_line)
    return match.group(1) if match else None
