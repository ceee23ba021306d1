"""Tests for raw value classification and style merging."""

import pytest

from themestyle.values import ValueKind, assign, classify, deep_merge


class TestClassify:
    @pytest.mark.parametrize("value", ["primary", "", 0, 4, 1.5, -2, True])
    def test_scalars(self, value):
        assert classify(value) is ValueKind.SCALAR

    def test_absent(self):
        assert classify(None) is ValueKind.ABSENT

    def test_responsive(self):
        assert classify({"xs": 1, "md": 2}) is ValueKind.RESPONSIVE

    @pytest.mark.parametrize("value", [False, [1, 2], (1,), object()])
    def test_other(self, value):
        assert classify(value) is ValueKind.OTHER


class TestDeepMerge:
    def test_nested_mappings_merge(self):
        acc = {"color": "red", "@media (min-width: 768px)": {"color": "blue"}}
        deep_merge(acc, {"@media (min-width: 768px)": {"margin": 4}})
        assert acc == {
            "color": "red",
            "@media (min-width: 768px)": {"color": "blue", "margin": 4},
        }

    def test_right_side_wins_for_scalars(self):
        assert deep_merge({"color": "red"}, {"color": "blue"}) == {"color": "blue"}

    def test_mapping_replaces_scalar(self):
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_none_item_is_ignored(self):
        assert deep_merge({"a": 1}, None) == {"a": 1}

    def test_nested_values_are_copied(self):
        nested = {"color": "red"}
        acc = deep_merge({}, {"&:hover": nested})
        acc["&:hover"]["color"] = "blue"
        assert nested == {"color": "red"}


class TestAssign:
    def test_shallow_overwrite(self):
        acc = {"a": {"x": 1}, "b": 2}
        assign(acc, {"a": {"y": 2}})
        assert acc == {"a": {"y": 2}, "b": 2}
