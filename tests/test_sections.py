import pytest

from asc_timetable.errors import InvalidXmlError, UnsupportedFormatError
from asc_timetable.sections import (
    MISSING,
    locate_meta,
    locate_section,
    locate_timetable,
    select_root,
)


class TestSelectRoot:
    def test_top_level_timetable_keeps_tree(self):
        tree = {"timetable": {"lessons": None}}
        assert select_root(tree) is tree

    def test_asc_wrapper(self):
        inner = {"timetable": None}
        assert select_root({"asc": inner, "other": "x"}) is inner

    def test_asc_timetable_wrapper(self):
        inner = {"lessons": {}}
        assert select_root({"ascTimetable": inner, "x": "y"}) is inner

    def test_single_key_is_unwrapped(self):
        inner = {"rooms": None}
        assert select_root({"vendorExport": inner}) is inner

    def test_single_scalar_key_keeps_tree(self):
        tree = {"timetable": None}
        assert select_root(tree) is tree

    def test_multiple_keys_keep_tree(self):
        tree = {"a": {}, "b": {}}
        assert select_root(tree) is tree

    def test_non_mapping_is_invalid(self):
        with pytest.raises(InvalidXmlError):
            select_root("text")


class TestLocateTimetable:
    def test_explicit_timetable_even_if_empty(self):
        assert locate_timetable({"timetable": None}) == {}

    def test_unwrapped_with_known_section(self):
        root = {"lesson": None, "junk": "x"}
        assert locate_timetable(root) is root

    def test_unknown_shape_is_unsupported(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            locate_timetable({"data": None})
        assert exc_info.value.code == "UNSUPPORTED_FORMAT"


class TestLocateSection:
    def test_wrapped_children_win(self):
        rooms = [{"id": "R1"}, {"id": "R2"}]
        assert locate_section({"rooms": {"room": rooms}}, "rooms") == rooms

    def test_direct_wrapper_when_child_missing(self):
        wrapper = {"classroom": {"id": "R1"}}
        assert locate_section({"rooms": wrapper}, "rooms") == wrapper

    def test_singular_unwrapped(self):
        assert locate_section({"teacher": {"id": "T1"}}, "teachers") == {"id": "T1"}

    def test_legacy_classrooms(self):
        timetable = {"classrooms": {"classroom": {"id": "R1"}}}
        assert locate_section(timetable, "rooms") == {"id": "R1"}

    def test_first_defined_candidate_wins(self):
        timetable = {"rooms": {"room": []}, "room": {"id": "R9"}}
        assert locate_section(timetable, "rooms") == []

    def test_absent(self):
        assert locate_section({"lessons": None}, "lessons") is None
        assert locate_section({}, "periods") is None

    def test_empty_element_wins_over_later_candidates(self):
        timetable = {"rooms": None, "room": {"id": "R9"}}
        assert locate_section(timetable, "rooms") is None

    def test_default_only_when_no_key_exists(self):
        assert locate_section({}, "periods", MISSING) is MISSING
        assert locate_section({"periods": None}, "periods", MISSING) is None


def test_locate_meta_prefers_root_then_timetable():
    assert locate_meta({"meta": {"version": "1"}}, {"header": {"version": "2"}}) == {"version": "1"}
    assert locate_meta({"timetable": {}}, {"header": {"version": "2"}}) == {"version": "2"}
    assert locate_meta({}, {}) is None
