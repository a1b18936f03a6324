import pytest

from asc_timetable.fields import (
    RelationShape,
    classify_relation,
    collect_unknown,
    first_present,
    resolve_field,
    resolve_relation,
)

TEACHER_KEYS = ("teacherIds", "teachers", "teacher", "teacherids")


class TestResolveField:
    def test_first_alias_wins(self):
        node = {"title": "Lab", "name": "Room 1"}
        assert resolve_field(node, ("name", "title")) == "Room 1"

    def test_falls_through_missing_and_structured_values(self):
        node = {"name": {"nested": "x"}, "title": " Lab "}
        assert resolve_field(node, ("id", "name", "title")) == "Lab"

    def test_empty_string_still_wins(self):
        node = {"name": "", "title": "Lab"}
        assert resolve_field(node, ("name", "title")) == ""

    def test_absent(self):
        assert resolve_field({"x": "1"}, ("id",)) is None

    def test_non_mapping_node(self):
        assert resolve_field("T1", ("id",)) is None
        assert resolve_field(None, ("id",)) is None


def test_first_present_skips_none_only():
    node = {"day": None, "dow": "abc", "x": "3"}
    assert first_present(node, ("day", "dow", "x")) == "abc"
    assert first_present(node, ("missing",)) is None


class TestResolveRelation:
    @pytest.mark.parametrize(
        "node",
        [
            {"teacherIds": "T1, T2 T3"},
            {"teacher": ["T1", "T2", "T3"]},
            {"teacher": [{"id": "T1"}, {"id": "T2"}, {"id": "T3"}]},
            {"teachers": {"id": ["T1", "T2", "T3"]}},
        ],
    )
    def test_representations_normalize_to_same_ids(self, node):
        assert resolve_relation(node, TEACHER_KEYS) == ["T1", "T2", "T3"]

    def test_delimited_string_handles_runs_of_separators(self):
        node = {"teacherIds": " ,T1,,  T2\tT3 ,"}
        assert resolve_relation(node, TEACHER_KEYS) == ["T1", "T2", "T3"]

    def test_first_present_key_short_circuits_even_when_empty(self):
        node = {"teacherIds": " , ", "teachers": "T9"}
        assert resolve_relation(node, TEACHER_KEYS) == []

    def test_list_items_use_value_and_underscore_id(self):
        node = {"teacher": [{"value": "T1"}, {"_id": "T2"}, {"other": "x"}, "", 7]}
        assert resolve_relation(node, TEACHER_KEYS) == ["T1", "T2", "7"]

    def test_single_object_with_id(self):
        assert resolve_relation({"teacher": {"id": "T1", "name": "A"}}, TEACHER_KEYS) == ["T1"]

    def test_single_object_without_id_falls_back_to_value(self):
        assert resolve_relation({"teacher": {"value": "T4"}}, TEACHER_KEYS) == ["T4"]

    def test_absent_is_empty_list(self):
        assert resolve_relation({"room": "R1"}, TEACHER_KEYS) == []
        assert resolve_relation({"teacher": None}, TEACHER_KEYS) == []

    def test_conflicting_aliases_take_priority_order(self):
        node = {"teachers": "T2", "teacherIds": "T1"}
        assert resolve_relation(node, TEACHER_KEYS) == ["T1"]


def test_classify_relation():
    assert classify_relation("T1 T2") is RelationShape.DELIMITED
    assert classify_relation(["T1"]) is RelationShape.LIST
    assert classify_relation({"id": "T1"}) is RelationShape.OBJECT


def test_collect_unknown_keeps_only_unknown_scalars():
    node = {"id": "L1", "extra": " x ", "nested": {"a": "b"}, "empty": None, "n": 3}
    assert collect_unknown(node, {"id"}) == {"extra": "x", "n": "3"}
