"""ASC timetable XML parser.

Turns the many dialects of ASC timetable exports into one normalized
document of rooms, teachers, classes, subjects, periods and lessons.
"""

from asc_timetable.errors import (
    AscXmlError,
    InvalidXmlError,
    MissingFieldError,
    UnsupportedFormatError,
)
from asc_timetable.models import (
    AscDocument,
    Entities,
    Lesson,
    Meta,
    ParseOptions,
    Period,
    Room,
    SchoolClass,
    Subject,
    Teacher,
)
from asc_timetable.parse import parse_asc_xml

__all__ = [
    "parse_asc_xml",
    "ParseOptions",
    "AscDocument",
    "Entities",
    "Meta",
    "Room",
    "Teacher",
    "SchoolClass",
    "Subject",
    "Period",
    "Lesson",
    "AscXmlError",
    "InvalidXmlError",
    "UnsupportedFormatError",
    "MissingFieldError",
]
