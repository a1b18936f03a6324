"""Document assembly: XML text in, AscDocument out.

parse_asc_xml is a pure function of (text, options). It performs no I/O,
keeps no global state and never logs; every failure is raised as an
AscXmlError subclass before any partial document exists.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from asc_timetable.builders import (
    build_classes,
    build_lessons,
    build_periods,
    build_rooms,
    build_subjects,
    build_teachers,
)
from asc_timetable.errors import MissingFieldError
from asc_timetable.fields import resolve_field
from asc_timetable.models import AscDocument, Entities, Meta, ParseOptions
from asc_timetable.sections import (
    MISSING,
    locate_meta,
    locate_section,
    locate_timetable,
    select_root,
)
from asc_timetable.xml import parse_xml

T = TypeVar("T")

META_SOURCE_KEYS = ("source", "exporter", "generator")
META_GENERATED_KEYS = ("generatedAt", "generated", "created")
META_VERSION_KEYS = ("version", "ver")


def resolve_options(options: ParseOptions | Mapping[str, Any] | None) -> ParseOptions:
    """Merge caller overrides onto the default ParseOptions."""
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions.model_validate(dict(options))


def stable_sort_by(items: list[T], key: Callable[[T], Any]) -> list[T]:
    """Return a new list sorted by key; equal keys keep their input order."""
    return sorted(items, key=key)


def extract_meta(node: Any) -> Meta:
    return Meta(
        source=resolve_field(node, META_SOURCE_KEYS) or None,
        generated_at=resolve_field(node, META_GENERATED_KEYS) or None,
        version=resolve_field(node, META_VERSION_KEYS) or None,
    )


def parse_asc_xml(
    xml: str | bytes,
    options: ParseOptions | Mapping[str, Any] | None = None,
) -> AscDocument:
    """Parse an ASC timetable XML export into a normalized document.

    Args:
        xml: XML text (str or bytes).
        options: ParseOptions, a mapping of overrides such as
            {"strict": False}, or None for the defaults.

    Returns:
        AscDocument with every collection sorted by its natural key.

    Raises:
        InvalidXmlError: Text is not well-formed XML.
        UnsupportedFormatError: XML does not look like an ASC timetable.
        MissingFieldError: Strict mode only; a required field or all lessons are missing.
    """
    opts = resolve_options(options)
    root = select_root(parse_xml(xml))
    timetable = locate_timetable(root)

    meta = extract_meta(locate_meta(root, timetable))

    rooms = build_rooms(locate_section(timetable, "rooms"), opts)
    teachers = build_teachers(locate_section(timetable, "teachers"), opts)
    classes = build_classes(locate_section(timetable, "classes"), opts)
    subjects = build_subjects(locate_section(timetable, "subjects"), opts)
    periods = build_periods(locate_section(timetable, "periods", MISSING), opts)
    lessons = build_lessons(locate_section(timetable, "lessons"), opts)

    if opts.strict and not lessons:
        raise MissingFieldError("No lessons found", "timetable.lessons")

    return AscDocument(
        meta=meta,
        entities=Entities(
            rooms=stable_sort_by(rooms, lambda r: r.id),
            teachers=stable_sort_by(teachers, lambda t: t.id),
            classes=stable_sort_by(classes, lambda c: c.id),
            subjects=stable_sort_by(subjects, lambda s: s.id),
            lessons=stable_sort_by(lessons, lambda lesson: lesson.id),
            periods=(
                stable_sort_by(periods, lambda p: p.index) if periods is not None else None
            ),
        ),
    )
