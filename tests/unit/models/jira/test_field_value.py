"""Tests for the typed Jira field value helpers."""

import pytest

from mcp_jira.models.jira.field_value import (
    DocumentValue,
    ListValue,
    ObjectValue,
    OptionValue,
    ScalarValue,
    UserValue,
    format_field_value,
    has_meaningful_value,
    parse_field_value,
)
from tests.utils.factories import AdfFactory


class TestParseFieldValue:
    def test_none(self):
        assert parse_field_value(None) is None

    @pytest.mark.parametrize("raw", ["text", 3, 2.5, True])
    def test_scalars(self, raw):
        value = parse_field_value(raw)
        assert isinstance(value, ScalarValue)
        assert value.value == raw

    def test_document(self):
        assert isinstance(parse_field_value(AdfFactory.paragraph("x")), DocumentValue)

    def test_user(self):
        value = parse_field_value({"displayName": "Jane", "accountId": "abc"})
        assert value == UserValue(display_name="Jane", account_id="abc")

    def test_option_prefers_value_over_name(self):
        value = parse_field_value({"value": "High", "name": "ignored", "id": "1"})
        assert isinstance(value, OptionValue)
        assert value.label == "High"

    def test_named_reference(self):
        value = parse_field_value({"name": "1.0", "id": "100"})
        assert isinstance(value, OptionValue)
        assert value.label == "1.0"

    def test_other_object(self):
        assert isinstance(parse_field_value({"foo": "bar"}), ObjectValue)

    def test_list(self):
        value = parse_field_value(["a", None, {"value": "b"}])
        assert isinstance(value, ListValue)
        assert value.items[1] is None
        assert isinstance(value.items[2], OptionValue)


class TestFormatFieldValue:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (None, "Not set"),
            ("plain", "plain"),
            (5, "5"),
            ({"displayName": "Jane Doe"}, "Jane Doe"),
            ({"value": "High"}, "High"),
            ({"name": "Sprint 4"}, "Sprint 4"),
            (["a", "b"], "a, b"),
            ([{"value": "x"}, {"name": "y"}], "x, y"),
        ],
    )
    def test_formats(self, raw, expected):
        assert format_field_value(raw) == expected

    def test_document_is_rendered_as_text(self):
        assert format_field_value(AdfFactory.paragraph("Body")) == "Body\n"

    def test_object_is_dumped_as_json(self):
        assert format_field_value({"foo": "bar"}) == '{"foo": "bar"}'

    def test_nested_option_label(self):
        assert format_field_value({"value": {"value": "inner"}}) == "inner"


class TestHasMeaningfulValue:
    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "   ",
            [],
            [None, ""],
            {},
            {"value": ""},
            {"foo": "bar"},
            AdfFactory.doc({"type": "paragraph", "content": []}),
            AdfFactory.paragraph("  "),
        ],
    )
    def test_empty_values(self, raw):
        assert has_meaningful_value(raw) is False

    @pytest.mark.parametrize(
        "raw",
        [
            "0",
            0,
            False,
            1.5,
            ["", "x"],
            {"value": "High"},
            {"id": "10000"},
            {"displayName": "Jane"},
            AdfFactory.paragraph("text"),
        ],
    )
    def test_meaningful_values(self, raw):
        assert has_meaningful_value(raw) is True

    @pytest.mark.parametrize("raw", [{"displayName": None}, {"displayName": ""}])
    def test_blank_display_name_is_not_a_user(self, raw):
        assert not isinstance(parse_field_value(raw), UserValue)
        assert has_meaningful_value(raw) is False


def _nest(leaf, wrap, times=5000):
    for _ in range(times):
        leaf = wrap(leaf)
    return leaf


class TestDeeplyNestedValues:
    def test_nested_lists(self):
        raw = _nest("x", lambda inner: [inner])

        assert isinstance(format_field_value(raw), str)
        assert has_meaningful_value(raw) is False

    def test_nested_option_labels(self):
        raw = _nest("x", lambda inner: {"value": inner})

        assert isinstance(format_field_value(raw), str)
        assert has_meaningful_value(raw) is False

    def test_nested_object_dump(self):
        raw = _nest("x", lambda inner: {"foo": inner})

        assert format_field_value(raw) == "{...}"

    def test_display_name_is_never_the_string_none(self):
        assert format_field_value({"displayName": None, "id": "7"}) == (
            '{"displayName": null, "id": "7"}'
        )
