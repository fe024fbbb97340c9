"""Ordered, immutable collections of compiled rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from gitignore_rules.evaluator import DEFAULT_EVALUATOR, PathLike, Verdict, as_candidate
from gitignore_rules.patterns.models import Rule
from gitignore_rules.patterns.parser import compile_rule


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> RuleSet:
        return build_rule_set(lines)

    @classmethod
    def from_text(cls, text: str) -> RuleSet:
        return build_rule_set(text.splitlines())

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]


def build_rule_set(lines: Iterable[str]) -> RuleSet:
    """Compile ``lines`` in order, dropping blanks and comments."""
    rules: list[Rule] = []
    for line in lines:
        rule = compile_rule(line)
        if rule is not None:
            rules.append(rule)
    return RuleSet(rules=tuple(rules))


def query(rule_set: RuleSet, path: PathLike, is_directory: bool | None = None) -> Verdict:
    return DEFAULT_EVALUATOR.evaluate(rule_set, as_candidate(path, is_directory))
