"""Tests for the text and JSON output helpers."""

from __future__ import annotations

import json

from toolkata.output.formatter import (
    ENVELOPE_SCHEMA_NAME,
    ENVELOPE_SCHEMA_VERSION,
    format_table,
    json_envelope,
    section,
    to_json,
)


class TestFormatTable:
    def test_empty(self):
        assert format_table(["a", "b"], []) == "(none)"

    def test_columns_aligned(self):
        out = format_table(["id", "category"], [["basics-1", "BASICS"], ["x", "UNDO"]])
        lines = out.splitlines()
        assert lines[0].startswith("id        category")
        assert lines[1] == "--------  --------"
        assert lines[2] == "basics-1  BASICS"
        assert lines[3] == "x         UNDO"

    def test_budget(self):
        rows = [[str(i)] for i in range(5)]
        out = format_table(["n"], rows, budget=2)
        assert out.splitlines()[-1] == "(+3 more)"
        assert "4" not in out.splitlines()[2:-1]


class TestSection:
    def test_plain(self):
        assert section("T", ["a", "b"]) == "T\na\nb"

    def test_budget(self):
        assert section("T", ["a", "b", "c"], budget=1) == "T\na\n  (+2 more)"


class TestJson:
    def test_sorted_and_unicode(self):
        out = to_json({"b": "ß", "a": 1})
        assert out.index('"a"') < out.index('"b"')
        assert "ß" in out

    def test_envelope_shape(self):
        env = json_envelope("search", summary={"matches": 2}, rows=[1, 2])
        assert env["schema"] == ENVELOPE_SCHEMA_NAME
        assert env["schema_version"] == ENVELOPE_SCHEMA_VERSION
        assert env["command"] == "search"
        assert env["summary"] == {"matches": 2}
        assert env["rows"] == [1, 2]
        assert env["_meta"]["timestamp"].endswith("Z")
        assert json.loads(to_json(env))["command"] == "search"

    def test_envelope_default_summary(self):
        assert json_envelope("list")["summary"] == {}
