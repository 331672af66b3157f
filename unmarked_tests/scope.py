from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from unmarked_tests.decorators import scan_decorators


@dataclass(frozen=True)
class ClassScopeEntry:
    """Markers declared on a class, keyed by the indentation of its header."""

    indent: int
    markers: frozenset[str]


def update_class_scopes(
    scopes: list[ClassScopeEntry],
    lines: Sequence[str],
    index: int,
    indent: int,
) -> list[ClassScopeEntry]:
    """Return the active class scopes after the class header at `index`.

    Scopes at the same or deeper indentation are closed by the new class. The new class
    only opens a scope when it declares at least one marker.

    Args:
        scopes: Currently active class scopes, outermost first
        lines: All lines of the scanned file
        index: Index of the class header line
        indent: Indentation level of the class header

    Returns:
        New list of active class scopes
    """
    class_markers = scan_decorators(lines=lines, start_index=index)
    active_scopes = [scope for scope in scopes if scope.indent < indent]
    if class_markers:
        active_scopes.append(ClassScopeEntry(indent=indent, markers=frozenset(class_markers)))
    return active_scopes


def enclosing_scopes(scopes: Sequence[ClassScopeEntry], indent: int) -> Iterator[ClassScopeEntry]:
    """Yield the scopes enclosing a definition indented by `indent`."""
    for scope in scopes:
        if indent > scope.indent:
            yield scope
