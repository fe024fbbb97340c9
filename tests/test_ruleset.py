"""Tests for building rule sets from raw lines."""

from dataclasses import FrozenInstanceError

import pytest

from gitignore_rules.evaluator import Verdict
from gitignore_rules.patterns.parser import compile_rule
from gitignore_rules.ruleset import RuleSet, build_rule_set, query


def test_comments_and_blank_lines_produce_no_rules() -> None:
    rule_set = build_rule_set(["# comment", "", "*.o"])

    assert len(rule_set) == 1
    assert rule_set[0] == compile_rule("*.o")


def test_order_is_preserved_and_duplicates_kept() -> None:
    lines = ["*.log", "!keep.log", "*.log"]

    rule_set = build_rule_set(lines)

    assert [rule.raw_text for rule in rule_set] == lines


def test_from_text_splits_lines() -> None:
    rule_set = RuleSet.from_text("*.pyc\n__pycache__/\r\n\n# done\n")

    assert [rule.pattern for rule in rule_set] == ["*.pyc", "__pycache__"]
    assert rule_set[1].directory_only is True


def test_from_lines_accepts_any_iterable() -> None:
    rule_set = RuleSet.from_lines(line for line in ["a", "b"])

    assert len(rule_set) == 2


def test_rule_set_is_immutable() -> None:
    rule_set = build_rule_set(["*.o"])

    with pytest.raises(FrozenInstanceError):
        rule_set.rules = ()  # type: ignore[misc]


def test_query_delegates_to_evaluator() -> None:
    rule_set = build_rule_set(["*.o", "!main.o"])

    assert query(rule_set, "lib.o") == Verdict.EXCLUDED
    assert query(rule_set, "main.o") == Verdict.INCLUDED
    assert query(rule_set, "main.c") == Verdict.INCLUDED
