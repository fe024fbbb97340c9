from dataclasses import dataclass

from gitignore_rules.evaluator import MatchResult, Verdict


@dataclass(frozen=True)
class CheckRow:
    path: str
    is_directory: bool
    result: MatchResult

    @property
    def verdict(self) -> Verdict:
        return self.result.verdict

    @property
    def rule_text(self) -> str:
        if self.result.rule is None:
            return ""
        return self.result.rule.raw_text.strip()

    def as_dict(self) -> dict[str, str]:
        return {
            "path": self.path,
            "kind": "dir" if self.is_directory else "file",
            "verdict": self.verdict.value,
            "rule": self.rule_text,
        }
