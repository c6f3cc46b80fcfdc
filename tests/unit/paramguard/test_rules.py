"""Tests for paramguard.rules built-in rule factories."""

from __future__ import annotations

import re

from paramguard import rules


class TestNumericRules:
    def test_min_value(self):
        r = rules.min_value(1)
        assert r.name == "min_value"
        assert r.check(1)
        assert not r.check(0)
        assert r.message == "must be at least 1"

    def test_max_value(self):
        r = rules.max_value(10, "too big")
        assert r.check(10)
        assert not r.check(11)
        assert r.message == "too big"

    def test_between_is_inclusive(self):
        r = rules.between(1, 100)
        assert r.check(1) and r.check(100)
        assert not r.check(0) and not r.check(101)


class TestLengthRules:
    def test_min_length_on_strings_and_lists(self):
        r = rules.min_length(2)
        assert r.check("ab")
        assert r.check(["a", "b"])
        assert not r.check("a")

    def test_max_length(self):
        r = rules.max_length(3)
        assert r.check("abc")
        assert not r.check("abcd")


class TestChoiceAndFormatRules:
    def test_one_of(self):
        r = rules.one_of(["teal", "violet"])
        assert r.check("teal")
        assert not r.check("beige")
        assert r.message == "must be one of: teal, violet"

    def test_matches_requires_full_match(self):
        r = rules.matches(r"[a-z]+")
        assert r.check("abc")
        assert not r.check("abc1")

    def test_matches_accepts_compiled_pattern(self):
        r = rules.matches(re.compile(r"\d{3}"), "three digits")
        assert r.check("123")
        assert r.message == "three digits"

    def test_email(self):
        r = rules.email()
        assert r.check("ada@example.org")
        assert not r.check("ada@localhost")
        assert not r.check("not an email")


class TestAdHocRule:
    def test_rule_wraps_predicate(self):
        r = rules.rule("even", lambda v: v % 2 == 0, "must be even")
        assert r.name == "even"
        assert r.check(4)
        assert not r.check(3)

    def test_check_normalizes_truthiness(self):
        r = rules.rule("nonzero", lambda v: v, "must be nonzero")
        assert r.check(5) is True
        assert r.check(0) is False
