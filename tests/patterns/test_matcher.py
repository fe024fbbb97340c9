"""Tests for segment and segment-sequence matching."""

import pytest

from gitignore_rules.patterns.matcher import match_any_component, match_segment, match_segments
from gitignore_rules.patterns.models import GlobToken, PatternSegment, TokenKind
from gitignore_rules.patterns.parser import compile_rule


def _segment(pattern: str):
    rule = compile_rule(pattern)
    assert len(rule.segments) == 1
    return rule.segments[0]


@pytest.mark.parametrize(
    ("pattern", "name", "expected"),
    [
        ("foo", "foo", True),
        ("foo", "foobar", False),
        ("*.tmp", "a.tmp", True),
        ("*.tmp", ".tmp", True),
        ("*.tmp", "a.tmp.bak", False),
        ("a*c", "abc", True),
        ("a*c", "ac", True),
        ("a*c", "abcbc", True),
        ("a*c", "abcb", False),
        ("?.py", "a.py", True),
        ("?.py", "ab.py", False),
        ("*a*b*", "xxaxxbxx", True),
        ("*a*b*", "xxbxxaxx", False),
        ("[abc]x", "bx", True),
        ("[abc]x", "dx", False),
        ("[a-c]*", "cat", True),
        ("[!a-c]*", "cat", False),
        ("[!a-c]*", "dog", True),
        ("[z-a]", "m", False),
        ("v[[:digit:]]", "v1", True),
        ("v[[:digit:]]", "vx", False),
        ("foo[bar", "foo[bar", True),
        ("foo[bar", "foob", False),
        ("**foo", "barfoo", True),
        ("foo**bar", "fooXbar", True),
    ],
)
def test_match_segment(pattern: str, name: str, expected: bool) -> None:
    assert match_segment(_segment(pattern), name) is expected


def test_match_segment_case_insensitive() -> None:
    assert match_segment(_segment("README.md"), "readme.MD") is False
    assert match_segment(_segment("README.md"), "readme.MD", case_sensitive=False) is True
    assert match_segment(_segment("*.[A-Z]"), "file.c", case_sensitive=False) is True


def test_double_star_segment_matches_any_name() -> None:
    assert match_segment(_segment("**"), "anything") is True


@pytest.mark.parametrize(
    ("pattern", "path", "expected"),
    [
        ("**/foo", "foo", True),
        ("**/foo", "a/foo", True),
        ("**/foo", "a/b/foo", True),
        ("**/foo", "a/foo/b", False),
        ("a/**/b", "a/b", True),
        ("a/**/b", "a/x/b", True),
        ("a/**/b", "a/x/y/b", True),
        ("a/**/b", "b/a/b", False),
        ("abc/**", "abc", False),
        ("abc/**", "abc/x", True),
        ("abc/**", "abc/x/y", True),
        ("/config.json", "config.json", True),
        ("/config.json", "src/config.json", False),
        ("doc/*.txt", "doc/a.txt", True),
        ("doc/*.txt", "doc/sub/a.txt", False),
        ("**/x/**/y", "a/x/b/c/y", True),
        ("**/x/**/y", "x/y", True),
    ],
)
def test_match_segments(pattern: str, path: str, expected: bool) -> None:
    rule = compile_rule(pattern)

    assert match_segments(rule.segments, path.split("/")) is expected


def test_match_segments_without_segments_never_matches() -> None:
    assert match_segments((), ["a"]) is False


def test_match_any_component_checks_every_level() -> None:
    segment = _segment("node_modules")

    assert match_any_component(segment, ["node_modules"]) is True
    assert match_any_component(segment, ["web", "node_modules", "x.js"]) is True
    assert match_any_component(segment, ["web", "modules"]) is False


def test_star_never_crosses_separator() -> None:
    rule = compile_rule("a*c")

    assert match_any_component(rule.segments[0], ["a", "c"]) is False


def test_class_token_without_members_matches_nothing() -> None:
    segment = PatternSegment(tokens=(GlobToken(kind=TokenKind.CHAR_CLASS),))

    assert segment.tokens[0].describe() == ""
    assert match_segment(segment, "a") is False
