from gitignore_rules.patterns.matcher import match_any_component, match_segment, match_segments
from gitignore_rules.patterns.models import (
    CharClass,
    GlobToken,
    PatternSegment,
    Rule,
    TokenKind,
)
from gitignore_rules.patterns.parser import compile_rule

__all__ = [
    "CharClass",
    "GlobToken",
    "PatternSegment",
    "Rule",
    "TokenKind",
    "compile_rule",
    "match_any_component",
    "match_segment",
    "match_segments",
]
