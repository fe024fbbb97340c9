"""Match paths against rules written in the .gitignore pattern language."""

from gitignore_rules.errors import (
    IgnoreFileError,
    IgnoreFileReadError,
    IgnoreRulesError,
    InvalidPathError,
)
from gitignore_rules.evaluator import (
    Evaluator,
    MatchOptions,
    MatchResult,
    Verdict,
    evaluate,
    evaluate_with_ancestors,
    explain,
)
from gitignore_rules.ignore_file import IgnoreFile
from gitignore_rules.paths import CandidatePath
from gitignore_rules.patterns import PatternSegment, Rule, compile_rule
from gitignore_rules.ruleset import RuleSet, build_rule_set, query

__all__ = [
    "CandidatePath",
    "Evaluator",
    "IgnoreFile",
    "IgnoreFileError",
    "IgnoreFileReadError",
    "IgnoreRulesError",
    "InvalidPathError",
    "MatchOptions",
    "MatchResult",
    "PatternSegment",
    "Rule",
    "RuleSet",
    "Verdict",
    "build_rule_set",
    "compile_rule",
    "evaluate",
    "evaluate_with_ancestors",
    "explain",
    "query",
]
