"""Evaluate an ordered rule set against a candidate path."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Iterable

from gitignore_rules.paths import CandidatePath
from gitignore_rules.patterns.matcher import match_any_component, match_segments
from gitignore_rules.patterns.models import Rule

if TYPE_CHECKING:
    from gitignore_rules.ruleset import RuleSet


class Verdict(str, Enum):
    EXCLUDED = "excluded"
    INCLUDED = "included"


@dataclass(frozen=True)
class MatchOptions:
    case_sensitive: bool = True


@dataclass(frozen=True)
class MatchResult:
    verdict: Verdict
    rule: Rule | None = None

    @property
    def excluded(self) -> bool:
        return self.verdict == Verdict.EXCLUDED


PathLike = str | PurePath | CandidatePath


class Evaluator:
    """Last-match-wins evaluation of ignore rules.

    Holds only its match options, so one instance can serve any number of
    threads and rule sets.
    """

    def __init__(self, options: MatchOptions | None = None) -> None:
        self._options = options or MatchOptions()

    @property
    def options(self) -> MatchOptions:
        return self._options

    def rule_matches(self, rule: Rule, candidate: CandidatePath) -> bool:
        if rule.matches_nothing:
            return False
        if rule.directory_only and not candidate.is_directory:
            return False
        case_sensitive = self._options.case_sensitive
        if rule.anchored:
            return match_segments(rule.segments, candidate.parts, case_sensitive)
        return match_any_component(rule.segments[0], candidate.parts, case_sensitive)

    def explain(self, rules: Iterable[Rule], candidate: CandidatePath) -> MatchResult:
        result = MatchResult(verdict=Verdict.INCLUDED)
        for rule in rules:
            if not self.rule_matches(rule, candidate):
                continue
            verdict = Verdict.INCLUDED if rule.negated else Verdict.EXCLUDED
            result = MatchResult(verdict=verdict, rule=rule)
        return result

    def evaluate(self, rules: Iterable[Rule], candidate: CandidatePath) -> Verdict:
        return self.explain(rules, candidate).verdict

    def explain_with_ancestors(
        self, rules: Iterable[Rule], candidate: CandidatePath
    ) -> MatchResult:
        """Like ``explain``, but an excluded parent directory excludes the path.

        Ancestors are checked root first; the first excluded one decides, since
        nothing below an excluded directory can be re-included.
        """
        rules = tuple(rules)
        for ancestor in candidate.ancestors():
            result = self.explain(rules, ancestor)
            if result.excluded:
                return result
        return self.explain(rules, candidate)

    def evaluate_with_ancestors(
        self, rules: Iterable[Rule], candidate: CandidatePath
    ) -> Verdict:
        return self.explain_with_ancestors(rules, candidate).verdict


DEFAULT_EVALUATOR = Evaluator()


def as_candidate(path: PathLike, is_directory: bool | None = None) -> CandidatePath:
    if isinstance(path, CandidatePath):
        if is_directory is None or is_directory == path.is_directory:
            return path
        return replace(path, is_directory=is_directory)
    return CandidatePath.parse(path, is_directory=is_directory)


def evaluate(
    rule_set: RuleSet, candidate_path: PathLike, is_directory: bool | None = None
) -> Verdict:
    return DEFAULT_EVALUATOR.evaluate(rule_set, as_candidate(candidate_path, is_directory))


def explain(
    rule_set: RuleSet, candidate_path: PathLike, is_directory: bool | None = None
) -> MatchResult:
    return DEFAULT_EVALUATOR.explain(rule_set, as_candidate(candidate_path, is_directory))


def evaluate_with_ancestors(
    rule_set: RuleSet, candidate_path: PathLike, is_directory: bool | None = None
) -> Verdict:
    return DEFAULT_EVALUATOR.evaluate_with_ancestors(
        rule_set, as_candidate(candidate_path, is_directory)
    )
