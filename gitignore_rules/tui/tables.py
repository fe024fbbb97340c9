from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from gitignore_rules.models import CheckRow
from gitignore_rules.ruleset import RuleSet
from gitignore_rules.tui.enums import VERDICT_STYLE, UIStyle


def _flag(value: bool) -> str:
    return f"[{UIStyle.YELLOW.value}]yes[/{UIStyle.YELLOW.value}]" if value else ""


class CheckTable:
    @staticmethod
    def summary_block(rows: list[CheckRow], source: str, rule_count: int) -> Table:
        counts = Counter(row.verdict.value for row in rows)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Rules", escape(f"{source} ({rule_count})"))
        table.add_row("Paths", str(len(rows)))
        table.add_row("Verdicts", "  ".join(chips))
        return table

    @staticmethod
    def verdicts_table(rows: list[CheckRow]) -> Table:
        table = Table(
            Column(header="Path", overflow="fold"),
            Column(header="Kind", width=5),
            Column(header="Verdict", width=9),
            Column(header="Rule", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            style = VERDICT_STYLE.get(row.verdict, UIStyle.WHITE.value)
            item = row.as_dict()
            table.add_row(
                escape(item["path"]),
                item["kind"],
                f"[{style}]{item['verdict']}[/{style}]",
                escape(item["rule"]),
            )
        return table


class RulesTable:
    @staticmethod
    def rules_table(rule_set: RuleSet) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Line", overflow="fold"),
            Column(header="Negated", width=7),
            Column(header="Dir only", width=8),
            Column(header="Anchored", width=8),
            Column(header="Segments", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, rule in enumerate(rule_set, start=1):
            segments = " / ".join(segment.describe() for segment in rule.segments)
            if not segments:
                segments = f"[{UIStyle.DIM.value}](matches nothing)[/{UIStyle.DIM.value}]"
            else:
                segments = escape(segments)
            table.add_row(
                str(index),
                escape(rule.raw_text.strip()),
                _flag(rule.negated),
                _flag(rule.directory_only),
                _flag(rule.anchored),
                segments,
            )
        return table
