"""Error hierarchy for ASC timetable parsing.

Every failure surfaces as an AscXmlError so callers only need one except clause.
The subclasses pin the error code, which lets callers branch on the kind of
failure without comparing strings.

Example usage:
    try:
        doc = parse_asc_xml(text)
    except MissingFieldError as err:
        print(err.path)
"""

INVALID_XML = "INVALID_XML"
UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
MISSING_FIELD = "MISSING_FIELD"


class AscXmlError(Exception):
    """Base exception for all timetable parsing errors.

    Attributes:
        code: One of INVALID_XML, UNSUPPORTED_FORMAT, MISSING_FIELD.
        message: Human-readable description.
        path: Dotted path to the offending location, e.g. "timetable.rooms[2]".
    """

    code: str = ""

    def __init__(self, message: str, path: str | None = None, *, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class InvalidXmlError(AscXmlError):
    """Input is not well-formed XML, or parsed to nothing usable."""

    code = INVALID_XML


class UnsupportedFormatError(AscXmlError):
    """Well-formed XML that does not look like an ASC timetable."""

    code = UNSUPPORTED_FORMAT


class MissingFieldError(AscXmlError):
    """A required field or the mandatory lesson list is absent (strict mode only)."""

    code = MISSING_FIELD
