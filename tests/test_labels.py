"""Tests for label maps and the label selector matcher."""

from __future__ import annotations

import pytest

from tmplctx.labels import LabelMap, satisfies, value_matches


class TestLabelMap:
    """Tests for LabelMap accessors."""

    def test_exists(self):
        labels = LabelMap({"tier": "db"})
        assert labels.exists("tier") is True
        assert labels.exists("zone") is False

    def test_keys_are_case_sensitive(self):
        labels = LabelMap({"tier": "db"})
        assert labels.exists("Tier") is False

    def test_get_value(self):
        assert LabelMap({"tier": "db"}).get_value("tier") == "db"

    def test_get_value_missing_is_empty(self):
        assert LabelMap({"tier": "db"}).get_value("zone") == ""

    def test_is_read_only(self):
        labels = LabelMap({"tier": "db"})
        with pytest.raises(TypeError):
            labels["tier"] = "web"  # type: ignore[index]

    def test_copies_source(self):
        source = {"tier": "db"}
        labels = LabelMap(source)
        source["tier"] = "web"
        assert labels["tier"] == "db"

    def test_equal_and_hashable(self):
        a = LabelMap({"tier": "db", "zone": "eu"})
        b = LabelMap({"zone": "eu", "tier": "db"})
        assert a == b
        assert hash(a) == hash(b)

    def test_empty(self):
        labels = LabelMap()
        assert len(labels) == 0
        assert not labels


class TestValueMatches:
    """Tests for matching a single label value."""

    def test_exact_ignores_case(self):
        assert value_matches("foo", "Foo") is True
        assert value_matches("Foo", "foo") is True

    def test_exact_value_does_not_substring_match(self):
        assert value_matches("web-frontend", "web") is False

    def test_regex_anchored(self):
        assert value_matches("web-frontend", "^web-.*") is True
        assert value_matches("db-frontend", "^web-.*") is False

    def test_regex_is_searched_not_fully_matched(self):
        assert value_matches("eu-west-1", "west-[0-9]") is True

    def test_literal_value_is_exact_only(self):
        assert value_matches("db-replica", "db") is False
        assert value_matches("eu-west-1", "west") is False

    def test_case_folding_is_not_full_unicode_folding(self):
        assert value_matches("stra\u00dfe", "STRASSE") is False
        assert value_matches("\u00c9t\u00e9", "\u00e9T\u00c9") is True

    def test_invalid_regex_is_no_match(self):
        assert value_matches("a[b", "a[") is False

    def test_invalid_regex_still_matches_exactly(self):
        assert value_matches("a[", "A[") is True


class TestSatisfies:
    """Tests for label set satisfaction."""

    def test_empty_selector_matches_anything(self):
        assert satisfies(LabelMap({"tier": "db"}), LabelMap()) is True
        assert satisfies(LabelMap(), LabelMap()) is True

    def test_all_keys_required(self):
        candidate = LabelMap({"tier": "db", "zone": "eu-1"})
        assert satisfies(candidate, {"tier": "db", "zone": "eu-1"}) is True
        assert satisfies(candidate, {"tier": "db", "zone": "us-2"}) is False

    def test_missing_key_rejects(self):
        assert satisfies(LabelMap({"tier": "db"}), {"zone": ".*"}) is False

    def test_selector_key_is_case_sensitive(self):
        assert satisfies(LabelMap({"tier": "db"}), {"TIER": "db"}) is False

    def test_regex_value(self):
        assert satisfies(LabelMap({"zone": "eu-1"}), {"zone": "^eu-"}) is True

    def test_invalid_regex_rejects(self):
        assert satisfies(LabelMap({"tier": "db"}), {"tier": "(db"}) is False

    def test_accepts_plain_dicts(self):
        assert satisfies({"tier": "db"}, {"tier": "DB"}) is True
