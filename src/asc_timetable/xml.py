"""XML text to generic tree conversion.

Attributes and child elements are merged into a single mapping (no "@"
prefix), repeated elements become lists and empty elements become None.
"""

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from asc_timetable.errors import InvalidXmlError


def parse_xml(text: str | bytes) -> dict[str, Any]:
    """Parse XML text into a nested dict tree.

    Args:
        text: XML document as str or bytes.

    Returns:
        The parsed tree, keyed by the document's root element name.

    Raises:
        InvalidXmlError: If the text is not well-formed or yields no mapping.
    """
    try:
        parsed = xmltodict.parse(text, attr_prefix="", dict_constructor=dict)
    except ExpatError as exc:
        raise InvalidXmlError(str(exc) or "Invalid XML input") from exc
    except (ValueError, TypeError) as exc:
        raise InvalidXmlError(str(exc) or "Invalid XML input") from exc

    if not parsed or not isinstance(parsed, dict):
        raise InvalidXmlError("XML parsed to empty result")
    return parsed
