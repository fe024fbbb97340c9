from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from gitignore_rules.models import CheckRow
from gitignore_rules.ruleset import RuleSet
from gitignore_rules.tui.enums import UIStyle
from gitignore_rules.tui.tables import CheckTable, RulesTable
from gitignore_rules.utils import compact_home_path


def _section(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
    return Panel(body, title=title, border_style=style, padding=(0, 1))


class IgnoreConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_check(
        self, rows: list[CheckRow], errors: list[str], source: str, rule_count: int
    ) -> None:
        self.console.print(
            _section(
                "check overview",
                CheckTable.summary_block(rows, compact_home_path(source), rule_count),
            )
        )
        if rows:
            self.console.print(
                _section("verdicts", CheckTable.verdicts_table(rows), style=UIStyle.CYAN.value)
            )
        if errors:
            errors_text = "\n".join(f"- {escape(item)}" for item in errors)
            self.console.print(_section("errors", errors_text, style=UIStyle.RED.value))

    def render_rules(self, rule_set: RuleSet, source: str) -> None:
        if not len(rule_set):
            self.console.print(
                _section(
                    "rules",
                    f"No rules in {escape(compact_home_path(source))}.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        self.console.print(
            _section(
                f"rules: {escape(compact_home_path(source))}",
                RulesTable.rules_table(rule_set),
                style=UIStyle.MAGENTA.value,
            )
        )

    def render_tree(self, paths: list[str], root: str) -> None:
        tree = Tree(f"[bold]{escape(compact_home_path(root))}[/bold]")
        branches: dict[str, Tree] = {"": tree}
        for path in paths:
            parent, _, name = path.rpartition("/")
            branch = branches.get(parent, tree)
            branches[path] = branch.add(escape(name))
        self.console.print(tree)
