from typing import Final


IGNORE_FILENAME: Final[str] = ".gitignore"
GIT_DIRNAME: Final[str] = ".git"

COMMENT_PREFIX: Final[str] = "#"
NEGATION_PREFIX: Final[str] = "!"
ESCAPE_CHAR: Final[str] = "\\"
SEPARATOR: Final[str] = "/"

RULES_FILE_ENVVAR: Final[str] = "GITIGNORE_RULES_FILE"
IGNORE_CASE_ENVVAR: Final[str] = "GITIGNORE_RULES_IGNORE_CASE"
