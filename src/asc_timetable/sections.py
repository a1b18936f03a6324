"""Root selection, format detection and per-entity section lookup.

Exports wrap the timetable in arbitrary containers (<asc>, <ascTimetable>,
a single vendor-named root) and name each section differently. The tables
below list the accepted paths in priority order; the first path that yields
a value wins, even if that value turns out to be empty.
"""

from typing import Any

from asc_timetable.errors import InvalidXmlError, UnsupportedFormatError
from asc_timetable.tree import as_record

TIMETABLE_KEY = "timetable"
WRAPPER_KEYS: tuple[str, ...] = ("asc", "ascTimetable")

# Presence of any of these keys identifies an unwrapped ASC timetable.
KNOWN_SECTIONS: frozenset[str] = frozenset(
    {
        "lessons",
        "lesson",
        "teachers",
        "teacher",
        "rooms",
        "room",
        "classes",
        "class",
        "subjects",
        "subject",
        "periods",
        "period",
    }
)

# Each path is a tuple of keys walked from the timetable node.
SECTION_PATHS: dict[str, tuple[tuple[str, ...], ...]] = {
    "rooms": (
        ("rooms", "room"),
        ("rooms",),
        ("room",),
        ("classrooms", "classroom"),
        ("classrooms",),
    ),
    "teachers": (("teachers", "teacher"), ("teachers",), ("teacher",)),
    "classes": (("classes", "class"), ("classes",), ("class",)),
    "subjects": (("subjects", "subject"), ("subjects",), ("subject",)),
    "periods": (("periods", "period"), ("periods",), ("period",)),
    "lessons": (("lessons", "lesson"), ("lessons",), ("lesson",)),
}

META_KEYS: tuple[str, ...] = ("meta", "header")


def select_root(tree: Any) -> dict[str, Any]:
    """Pick the node that holds (or is) the timetable.

    Raises:
        InvalidXmlError: If the tree is not a mapping.
    """
    root = as_record(tree)
    if root is None:
        raise InvalidXmlError("XML parsed to empty result")
    if as_record(root.get(TIMETABLE_KEY)) is not None:
        return root
    for key in WRAPPER_KEYS:
        wrapped = as_record(root.get(key))
        if wrapped is not None:
            return wrapped
    if len(root) == 1:
        only = as_record(next(iter(root.values())))
        return only if only is not None else root
    return root


def locate_timetable(root: dict[str, Any]) -> dict[str, Any]:
    """Return the timetable node under root, or fail if root is not ASC.

    An explicit <timetable> element is accepted even when empty; otherwise
    root itself must carry at least one known section key.

    Raises:
        UnsupportedFormatError: If neither signal is present.
    """
    if TIMETABLE_KEY in root:
        return as_record(root[TIMETABLE_KEY]) or {}
    if not KNOWN_SECTIONS.intersection(root):
        raise UnsupportedFormatError("Input XML is not an ASC timetable")
    return root


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Returned when no candidate key exists. An empty element (None) is present.
MISSING: Any = _Missing()


def _walk(node: Any, path: tuple[str, ...]) -> Any:
    for key in path:
        record = as_record(node)
        if record is None or key not in record:
            return MISSING
        node = record[key]
    return node


def locate_section(timetable: dict[str, Any], entity: str, default: Any = None) -> Any:
    """Return the raw section value for an entity kind.

    A key holding an empty element (None) still wins over later candidates.
    default is returned only when none of the candidate keys exist.
    """
    for path in SECTION_PATHS[entity]:
        value = _walk(timetable, path)
        if value is not MISSING:
            return value
    return default


def locate_meta(root: dict[str, Any], timetable: dict[str, Any]) -> Any:
    """Find the meta/header node, preferring the root over the timetable."""
    for node in (root, timetable):
        for key in META_KEYS:
            value = node.get(key)
            if value is not None:
                return value
    return None
