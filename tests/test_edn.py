"""Tests for EDN reading and rendering."""

from __future__ import annotations

import pytest

from dotlib.edn import EdnError, dump_value, keyword, read_edn


class TestReadEdn:
    def test_map_with_keywords_and_set(self) -> None:
        data = read_edn('{:date "2025-01-01" :status :accepted :tag #{:x :y}}')
        assert data == {
            "date": "2025-01-01",
            "status": "accepted",
            "tag": frozenset({"x", "y"}),
        }

    def test_nested_map(self) -> None:
        data = read_edn('{:adr {:path "doc/adr" :metadata-extensions {:ticket {:required true}}}}')
        assert data == {
            "adr": {
                "path": "doc/adr",
                "metadata-extensions": {"ticket": {"required": True}},
            }
        }
        assert type(data["adr"]) is dict

    def test_vector_becomes_list(self) -> None:
        assert read_edn("[1 2 :three]") == [1, 2, "three"]

    def test_set_duplicates_collapse(self) -> None:
        assert read_edn("#{:a :b}") == frozenset({"a", "b"})

    def test_nil(self) -> None:
        assert read_edn("nil") is None

    def test_empty_text(self) -> None:
        assert read_edn("") is None
        assert read_edn("   \n") is None

    def test_comment_only(self) -> None:
        assert read_edn(";; nothing here\n; at all\n") is None

    def test_malformed_raises(self) -> None:
        with pytest.raises(EdnError):
            read_edn('{:a "unterminated')


class TestDumpValue:
    def test_string(self) -> None:
        assert dump_value("2025-01-01") == '"2025-01-01"'

    def test_keyword(self) -> None:
        assert dump_value(keyword("accepted")) == ":accepted"

    def test_keyword_strips_colon(self) -> None:
        assert dump_value(keyword(":accepted")) == ":accepted"

    def test_set_is_sorted(self) -> None:
        assert dump_value(frozenset({keyword("b"), keyword("a")})) == "#{:a :b}"

    def test_map(self) -> None:
        value = {keyword("created"): "2025-01-01", keyword("modified"): "2025-02-01"}
        assert dump_value(value) == '{:created "2025-01-01" :modified "2025-02-01"}'

    def test_rendered_set_reads_back(self) -> None:
        text = dump_value(frozenset({keyword("x"), keyword("y")}))
        assert read_edn(text) == frozenset({"x", "y"})
