"""
Tests for frontend/utils/normalizer.py - Bin display, editor JSON and form input.
"""
import json

import pytest

from frontend.utils.errors import ValidationError
from frontend.utils.normalizer import (
    OMIT,
    bins_to_editor_text,
    build_record,
    coerce_bin_value,
    editor_text_to_bins,
    format_value,
    parse_nested,
    parse_ttl,
)


class TestFormatValue:
    """Tests for format_value function."""

    def test_scalars(self):
        assert format_value("Alice") == "Alice"
        assert format_value(31) == "31"
        assert format_value(1.5) == "1.5"

    def test_none_is_dash(self):
        assert format_value(None) == "-"

    def test_booleans_are_lowercase(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_collections_are_compact_json(self):
        assert format_value(["admin", "ops"]) == '["admin","ops"]'
        assert format_value({"city": "Paris"}) == '{"city":"Paris"}'

    def test_unicode_kept(self):
        assert format_value({"city": "Zürich"}) == '{"city":"Zürich"}'


class TestParseNested:
    """Tests for parse_nested function."""

    def test_json_object_string_expanded(self, sample_record):
        bins = parse_nested(sample_record["bins"])

        assert bins["profile"] == {"city": "Paris", "langs": ["fr", "en"]}
        assert bins["tags"] == ["admin", "ops"]

    def test_scalar_looking_strings_kept(self):
        """Only objects and arrays are substituted."""
        assert parse_nested("42") == "42"
        assert parse_nested("true") == "true"
        assert parse_nested('"quoted"') == '"quoted"'

    def test_plain_strings_kept(self):
        assert parse_nested("{not json") == "{not json"

    def test_expands_at_any_depth(self):
        value = {"outer": ['{"inner": "[1, 2]"}']}

        assert parse_nested(value) == {"outer": [{"inner": [1, 2]}]}


class TestEditorText:
    """Tests for the edit panel JSON round trip."""

    def test_editor_text_is_indented(self, sample_record):
        text = bins_to_editor_text(sample_record["bins"])

        assert '\n  "name": "Alice"' in text
        assert json.loads(text)["profile"]["city"] == "Paris"

    def test_editor_text_round_trip(self, sample_record):
        """Editing nothing writes back the expanded bins."""
        bins = editor_text_to_bins(bins_to_editor_text(sample_record["bins"]))

        assert bins == parse_nested(sample_record["bins"])

    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc:
            editor_text_to_bins('{"name": ')

        assert exc.value.message.startswith("Invalid JSON format for bins:")
        assert exc.value.field == "bins"

    def test_must_be_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            editor_text_to_bins("[1, 2]")

    def test_must_not_be_empty(self):
        with pytest.raises(ValidationError, match="At least one bin"):
            editor_text_to_bins("{}")


class TestParseTtl:
    """Tests for parse_ttl function."""

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_means_default(self, text):
        assert parse_ttl(text) is None

    def test_values(self):
        assert parse_ttl("3600") == 3600
        assert parse_ttl(" -1 ") == -1
        assert parse_ttl("0") == 0

    def test_not_a_number(self):
        with pytest.raises(ValidationError) as exc:
            parse_ttl("1h")

        assert exc.value.field == "ttl"


class TestCoerceBinValue:
    """Tests for coerce_bin_value function."""

    def test_empty_input_is_omitted(self):
        assert coerce_bin_value("", "string") is OMIT
        assert coerce_bin_value(None, "number") is OMIT
        assert coerce_bin_value("", "json") is OMIT

    def test_falsy_values_are_not_empty(self):
        """0 and "0" are values, only "" and None mean no input."""
        assert coerce_bin_value("0", "number") == 0
        assert coerce_bin_value(0, "number") == 0
        assert coerce_bin_value("0", "string") == "0"
        assert coerce_bin_value(" ", "string") == " "

    def test_booleans(self):
        assert coerce_bin_value(True, "boolean") is True
        assert coerce_bin_value("TRUE", "boolean") is True
        assert coerce_bin_value("false", "boolean") is False
        assert coerce_bin_value(None, "boolean") is False
        assert coerce_bin_value("", "boolean") is False

    def test_numbers(self):
        assert coerce_bin_value("42", "number") == 42
        assert isinstance(coerce_bin_value("42", "number"), int)
        assert coerce_bin_value("2.5", "number") == 2.5

    def test_not_a_number(self):
        with pytest.raises(ValidationError, match="Not a number"):
            coerce_bin_value("abc", "number")

    def test_json(self):
        assert coerce_bin_value('{"a": [1]}', "json") == {"a": [1]}

    def test_invalid_json(self):
        with pytest.raises(ValidationError, match="Invalid JSON value"):
            coerce_bin_value("{oops", "json")

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            coerce_bin_value("x", "geojson")


class TestBuildRecord:
    """Tests for build_record function."""

    def test_builds_request(self):
        body = build_record(
            " test ", "users", "bob",
            [
                {"name": "name", "value": "Bob", "type": "string"},
                {"name": "age", "value": "40", "type": "number"},
                {"name": "active", "value": False, "type": "boolean"},
            ],
            ttl="120",
        )

        assert body == {
            "namespace": "test",
            "set_name": "users",
            "key": "bob",
            "key_type": "string",
            "bins": {"name": "Bob", "age": 40, "active": False},
            "ttl": 120,
        }

    def test_blank_ttl_is_default(self):
        body = build_record("test", "users", "bob", [{"name": "n", "value": "1", "type": "number"}])

        assert body["ttl"] is None

    @pytest.mark.parametrize("namespace,set_name,key", [
        ("", "users", "bob"),
        ("test", " ", "bob"),
        ("test", "users", ""),
    ])
    def test_required_fields(self, namespace, set_name, key):
        with pytest.raises(ValidationError, match="Namespace, Set Name, and Key are required"):
            build_record(namespace, set_name, key, [{"name": "n", "value": "x"}])

    def test_rows_without_name_skipped(self):
        body = build_record("test", "users", "bob", [
            {"name": "", "value": "ignored", "type": "string"},
            {"name": "n", "value": "x", "type": "string"},
        ])

        assert body["bins"] == {"n": "x"}

    def test_empty_values_omitted(self):
        body = build_record("test", "users", "bob", [
            {"name": "n", "value": "x", "type": "string"},
            {"name": "note", "value": "", "type": "string"},
        ])

        assert "note" not in body["bins"]

    def test_duplicate_bin_name(self):
        with pytest.raises(ValidationError, match='Duplicate bin name: "n"'):
            build_record("test", "users", "bob", [
                {"name": "n", "value": "x", "type": "string"},
                {"name": " n ", "value": "y", "type": "string"},
            ])

    def test_duplicate_of_omitted_bin(self):
        """An omitted bin still claims its name."""
        with pytest.raises(ValidationError, match="Duplicate bin name"):
            build_record("test", "users", "bob", [
                {"name": "n", "value": "", "type": "string"},
                {"name": "n", "value": "y", "type": "string"},
            ])

    def test_needs_one_written_bin(self):
        with pytest.raises(ValidationError, match="At least one bin with a name and value"):
            build_record("test", "users", "bob", [
                {"name": "note", "value": "", "type": "string"},
            ])
