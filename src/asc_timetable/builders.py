"""Entity builders: one per entity kind.

Each builder takes the raw section value (any shape) and the active
ParseOptions. An element missing a required field either aborts the parse
(strict) or is dropped (non-strict); no entity is ever emitted half-populated.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from asc_timetable.errors import MissingFieldError
from asc_timetable.fields import (
    collect_unknown,
    first_present,
    resolve_field,
    resolve_relation,
)
from asc_timetable.models import (
    Lesson,
    ParseOptions,
    Period,
    Room,
    SchoolClass,
    Subject,
    Teacher,
)
from asc_timetable.sections import MISSING
from asc_timetable.tree import as_record, to_list, to_number

T = TypeVar("T")

SHORT_KEYS = ("short", "code", "abbr")
START_KEYS = ("start", "starttime")
END_KEYS = ("end", "endtime")

ROOM_ID_KEYS = ("id", "roomid", "_id")
ROOM_NAME_KEYS = ("name", "roomname", "title", "short")

TEACHER_ID_KEYS = ("id", "teacherid", "_id")
TEACHER_NAME_KEYS = ("name", "fullname", "teachername", "title")

CLASS_ID_KEYS = ("id", "classid", "_id")
CLASS_NAME_KEYS = ("name", "classname", "title", "short")

SUBJECT_ID_KEYS = ("id", "subjectid", "_id")
SUBJECT_NAME_KEYS = ("name", "subjectname", "title")

PERIOD_ID_KEYS = ("id", "periodid", "_id")
PERIOD_INDEX_KEYS = ("index", "number", "position", "period")

LESSON_ID_KEYS = ("id", "lessonid", "_id")
LESSON_DAY_KEYS = ("day", "dow")
LESSON_PERIOD_KEYS = ("period", "slot")
LESSON_SUBJECT_KEYS = ("subjectId", "subject", "subjectid")
LESSON_TEACHER_KEYS = ("teacherIds", "teachers", "teacher", "teacherids")
LESSON_CLASS_KEYS = ("classIds", "classes", "class", "classids", "groupids")
LESSON_ROOM_KEYS = ("roomIds", "rooms", "room", "roomids", "classroomids")

# Anything outside this set is "unknown" and may land in Lesson.raw.
LESSON_KNOWN_KEYS: frozenset[str] = frozenset(
    LESSON_ID_KEYS
    + LESSON_DAY_KEYS
    + LESSON_PERIOD_KEYS
    + START_KEYS
    + END_KEYS
    + LESSON_SUBJECT_KEYS
    + LESSON_TEACHER_KEYS
    + LESSON_CLASS_KEYS
    + LESSON_ROOM_KEYS
)


def _build_named(
    section: Any,
    options: ParseOptions,
    *,
    section_name: str,
    label: str,
    id_keys: tuple[str, ...],
    name_keys: tuple[str, ...],
    factory: Callable[[str, str, dict[str, Any]], T],
) -> list[T]:
    """Shared skeleton for id+name entities (rooms, teachers, classes, subjects)."""
    result: list[T] = []
    for idx, node in enumerate(to_list(section)):
        record = as_record(node) or {}
        entity_id = resolve_field(record, id_keys)
        name = resolve_field(record, name_keys)
        if not entity_id or not name:
            if options.strict:
                raise MissingFieldError(
                    f"{label} missing id or name",
                    f"timetable.{section_name}[{idx}]",
                )
            continue
        result.append(factory(entity_id, name, record))
    return result


def build_rooms(section: Any, options: ParseOptions) -> list[Room]:
    return _build_named(
        section,
        options,
        section_name="rooms",
        label="Room",
        id_keys=ROOM_ID_KEYS,
        name_keys=ROOM_NAME_KEYS,
        factory=lambda id_, name, _record: Room(id=id_, name=name),
    )


def build_teachers(section: Any, options: ParseOptions) -> list[Teacher]:
    return _build_named(
        section,
        options,
        section_name="teachers",
        label="Teacher",
        id_keys=TEACHER_ID_KEYS,
        name_keys=TEACHER_NAME_KEYS,
        factory=lambda id_, name, record: Teacher(
            id=id_, name=name, short=resolve_field(record, SHORT_KEYS)
        ),
    )


def build_classes(section: Any, options: ParseOptions) -> list[SchoolClass]:
    return _build_named(
        section,
        options,
        section_name="classes",
        label="Class",
        id_keys=CLASS_ID_KEYS,
        name_keys=CLASS_NAME_KEYS,
        factory=lambda id_, name, _record: SchoolClass(id=id_, name=name),
    )


def build_subjects(section: Any, options: ParseOptions) -> list[Subject]:
    return _build_named(
        section,
        options,
        section_name="subjects",
        label="Subject",
        id_keys=SUBJECT_ID_KEYS,
        name_keys=SUBJECT_NAME_KEYS,
        factory=lambda id_, name, record: Subject(
            id=id_, name=name, short=resolve_field(record, SHORT_KEYS)
        ),
    )


def build_periods(section: Any, options: ParseOptions) -> list[Period] | None:
    """Build periods, or return None when the source has no period section.

    An empty <periods/> element is present and yields an empty list.
    """
    if section is MISSING:
        return None
    result: list[Period] = []
    for idx, node in enumerate(to_list(section)):
        record = as_record(node) or {}
        index = to_number(resolve_field(record, PERIOD_INDEX_KEYS))
        if index is None:
            if options.strict:
                raise MissingFieldError(
                    "Period missing index", f"timetable.periods[{idx}].index"
                )
            continue
        result.append(
            Period(
                id=resolve_field(record, PERIOD_ID_KEYS),
                index=index,
                start=resolve_field(record, START_KEYS),
                end=resolve_field(record, END_KEYS),
            )
        )
    return result


def build_lesson(record: dict[str, Any], options: ParseOptions, lesson_id: str) -> Lesson:
    """Build one lesson from an element whose id is already resolved."""
    day = period = None
    if options.coerce_numbers:
        day = to_number(first_present(record, LESSON_DAY_KEYS))
        period = to_number(first_present(record, LESSON_PERIOD_KEYS))

    raw = None
    if not options.strict:
        raw = collect_unknown(record, LESSON_KNOWN_KEYS) or None

    return Lesson(
        id=lesson_id,
        day=day,
        period=period,
        start=resolve_field(record, START_KEYS),
        end=resolve_field(record, END_KEYS),
        subject_id=resolve_field(record, LESSON_SUBJECT_KEYS),
        teacher_ids=resolve_relation(record, LESSON_TEACHER_KEYS) or None,
        class_ids=resolve_relation(record, LESSON_CLASS_KEYS) or None,
        room_ids=resolve_relation(record, LESSON_ROOM_KEYS) or None,
        raw=raw,
    )


def build_lessons(section: Any, options: ParseOptions) -> list[Lesson]:
    result: list[Lesson] = []
    for idx, node in enumerate(to_list(section)):
        record = as_record(node) or {}
        lesson_id = resolve_field(record, LESSON_ID_KEYS)
        if not lesson_id:
            if options.strict:
                raise MissingFieldError("Lesson missing id", f"timetable.lessons[{idx}]")
            continue
        result.append(build_lesson(record, options, lesson_id))
    return result
