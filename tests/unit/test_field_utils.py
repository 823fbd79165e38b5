"""Unit tests for prefix composition and payload helpers."""

import pytest

from hrmless.core.errors import MissingParameterError
from hrmless.models import questionnaire
from hrmless.utils.fields import (
    build_field,
    build_key_and_label,
    child_mapping,
    remove_if_empty,
    remove_missing_values,
    render_path,
)


class TestBuildKeyAndLabel:
    """Tests for build_key_and_label."""

    def test_empty_prefix(self):
        """Test that an empty prefix yields empty key and label prefixes."""
        assert build_key_and_label("", True, False) == ("", "")
        assert build_key_and_label("", False, True) == ("", "")

    def test_input_field_uses_dot(self):
        """Test that input fields are joined with a dot."""
        result = build_key_and_label("parent")

        assert result.key_prefix == "parent."
        assert result.label_prefix == "parent."

    def test_output_array_child_uses_double_underscore(self):
        """Test output array children: '__' in keys, dots in labels."""
        result = build_key_and_label("parent", False, True)

        assert result.key_prefix == "parent__"
        assert result.label_prefix == "parent."

    def test_output_nested_object_uses_dot(self):
        """Test that output fields outside arrays keep dotted keys."""
        result = build_key_and_label("parent", False, False)

        assert result.key_prefix == "parent."

    def test_input_array_child_uses_dot(self):
        """Test that input array children keep dotted keys."""
        result = build_key_and_label("parent", True, True)

        assert result.key_prefix == "parent."

    def test_label_rewrites_every_double_underscore(self):
        """Test that nested double underscores all become dots in labels."""
        result = build_key_and_label("a__b", False, True)

        assert result.key_prefix == "a__b__"
        assert result.label_prefix == "a.b."


class TestRemoveIfEmpty:
    """Tests for remove_if_empty."""

    def test_empty_dict_becomes_none(self):
        assert remove_if_empty({}) is None

    def test_dict_with_value_is_kept(self):
        obj = {"a": 1}
        assert remove_if_empty(obj) is obj

    def test_dict_of_only_none_becomes_none(self):
        """Test that members without a value count as absent."""
        assert remove_if_empty({"a": None, "b": None}) is None

    def test_falsy_values_count_as_present(self):
        assert remove_if_empty({"a": False}) == {"a": False}
        assert remove_if_empty({"a": 0}) == {"a": 0}


class TestRemoveMissingValues:
    """Tests for remove_missing_values."""

    def test_drops_none_and_empty_string(self):
        result = remove_missing_values({"a": None, "b": "", "c": "x"})

        assert result == {"c": "x"}

    def test_keeps_falsy_non_missing_values(self):
        """Test that [], {}, False and 0 are still sent."""
        values = {"a": [], "b": {}, "c": False, "d": 0}

        assert remove_missing_values(values) == values

    def test_none_mapping(self):
        assert remove_missing_values(None) == {}

    def test_strips_nested_objects_and_list_items(self):
        """Test that nested members are dropped at every depth."""
        values = {
            "name": "Driver",
            "questionaire": [{"id": None, "name": "Q1", "value": ""}],
            "org": {"id": None, "name": "Acme", "contact": {"phone": None}},
        }

        assert remove_missing_values(values) == {
            "name": "Driver",
            "questionaire": [{"name": "Q1"}],
            "org": {"name": "Acme", "contact": {}},
        }


class TestChildMapping:
    """Tests for child_mapping."""

    def test_absent_items_map_to_none(self):
        assert child_mapping(None, "questionaire", questionnaire.mapping) is None

    def test_empty_items_map_to_empty_list(self):
        assert child_mapping([], "questionaire", questionnaire.mapping) == []

    def test_maps_each_item_in_order(self):
        """Test that every element goes through the child mapper."""
        items = [
            {"questionaire.name": "Q1", "questionaire.value": "First?"},
            {"questionaire.name": "Q2", "questionaire.value": "Second?"},
        ]

        result = child_mapping(items, "questionaire", questionnaire.mapping)

        assert result == [
            {"id": None, "name": "Q1", "value": "First?"},
            {"id": None, "name": "Q2", "value": "Second?"},
        ]


class TestBuildField:
    """Tests for build_field."""

    def test_input_field_has_guidance(self):
        field = build_field(
            "state",
            "State",
            is_input=True,
            required=True,
            help_text="Pick one",
            choices=["a", "b"],
            default="a",
        )

        assert field == {
            "key": "state",
            "label": "State",
            "type": "string",
            "required": True,
            "helpText": "Pick one",
            "choices": ["a", "b"],
            "default": "a",
        }

    def test_output_field_omits_guidance(self):
        """Test that output fields carry no helpText, choices or default."""
        field = build_field(
            "state",
            "State",
            is_input=False,
            help_text="Pick one",
            choices=["a", "b"],
            default="a",
        )

        assert field == {"key": "state", "label": "State", "type": "string"}

    def test_required_omitted_when_unspecified(self):
        field = build_field("x", "X", is_input=True)

        assert "required" not in field


class TestRenderPath:
    """Tests for render_path."""

    def test_org_id_from_auth_data_and_rest_from_input(self):
        bundle = {
            "authData": {"org_id": "org1"},
            "inputData": {"position_id": "P1", "candidate_id": "C1", "org_id": "ignored"},
        }

        path = render_path("/org/{org_id}/positions/{position_id}/candidates/{candidate_id}/", bundle)

        assert path == "/org/org1/positions/P1/candidates/C1/"

    def test_values_are_quoted(self):
        bundle = {"authData": {"org_id": "org 1"}, "inputData": {"position_id": "a/b"}}

        assert render_path("/org/{org_id}/position/{position_id}", bundle) == (
            "/org/org%201/position/a%2Fb"
        )

    def test_missing_parameter_raises(self):
        bundle = {"authData": {"org_id": "org1"}, "inputData": {}}

        with pytest.raises(MissingParameterError, match="position_id"):
            render_path("/org/{org_id}/position/{position_id}", bundle)
