"""Pydantic models for the normalized timetable document.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Fields are snake_case in Python and serialize to camelCase ("teacherIds",
"generatedAt"). Optional fields that were not found stay None and are left
out of to_dict()/to_json() output entirely.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class _Record(BaseModel):
    model_config = _MODEL_CONFIG

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with camelCase keys and absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ParseOptions(BaseModel):
    """Parsing policy.

    strict: missing required fields (or zero lessons) abort the parse.
    coerce_numbers: extract lesson day/period as numbers; when False they are
        never extracted.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    strict: bool = True
    coerce_numbers: bool = True


class Meta(_Record):
    """Free-form provenance taken from a meta/header section."""

    source: str | None = None
    generated_at: str | None = None
    version: str | None = None


class Room(_Record):
    id: str
    name: str


class Teacher(_Record):
    id: str
    name: str
    short: str | None = None


class SchoolClass(_Record):
    id: str
    name: str


class Subject(_Record):
    id: str
    name: str
    short: str | None = None


class Period(_Record):
    """A numbered slot of the school day. Only index is required."""

    id: str | None = None
    index: int | float
    start: str | None = None
    end: str | None = None


class Lesson(_Record):
    """A scheduled lesson.

    Relation lists are None rather than empty when no ids were found. raw
    holds unrecognized scalar fields and is only populated in non-strict mode.
    """

    id: str
    day: int | float | None = None
    period: int | float | None = None
    start: str | None = None
    end: str | None = None
    subject_id: str | None = None
    teacher_ids: list[str] | None = None
    class_ids: list[str] | None = None
    room_ids: list[str] | None = None
    raw: dict[str, str] | None = None


class Entities(_Record):
    """Entity collections; periods is None when the source has no period section."""

    rooms: list[Room]
    teachers: list[Teacher]
    classes: list[SchoolClass]
    subjects: list[Subject]
    lessons: list[Lesson]
    periods: list[Period] | None = None


class AscDocument(_Record):
    """Result of a single parse call."""

    meta: Meta
    entities: Entities

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON with the same shape as to_dict()."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
