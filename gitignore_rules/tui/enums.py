from enum import Enum

from gitignore_rules.evaluator import Verdict


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


VERDICT_STYLE = {
    Verdict.EXCLUDED: UIStyle.RED.value,
    Verdict.INCLUDED: UIStyle.GREEN.value,
}
