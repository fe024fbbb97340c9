from gitignore_rules.tui.renderers import IgnoreConsoleUI

__all__ = ["IgnoreConsoleUI"]
