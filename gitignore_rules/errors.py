from pathlib import Path, PurePath


class IgnoreRulesError(Exception):
    """Base user-facing library error."""


class InvalidPathError(IgnoreRulesError):
    def __init__(self, path: str | PurePath, message: str) -> None:
        self.path = str(path)
        self.message = message
        super().__init__(f"{message}: {self.path!r}")


class IgnoreFileError(IgnoreRulesError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class IgnoreFileReadError(IgnoreFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read ignore file ({detail})")
