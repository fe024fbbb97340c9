"""Candidate path validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath

from gitignore_rules.constants import SEPARATOR
from gitignore_rules.errors import InvalidPathError

_DRIVE_RE = re.compile(r"^[A-Za-z]:(?:[/\\]|$)")
_DISALLOWED_PARTS = (".", "..")


@dataclass(frozen=True)
class CandidatePath:
    parts: tuple[str, ...]
    is_directory: bool = False

    @classmethod
    def parse(cls, path: str | PurePath, is_directory: bool | None = None) -> CandidatePath:
        """Validate a relative, slash-delimited path.

        A trailing ``/`` marks the path as a directory unless ``is_directory``
        says otherwise. Repeated slashes collapse.
        """
        text = path.as_posix() if isinstance(path, PurePath) else str(path)
        if not text:
            raise InvalidPathError(path, "Empty candidate path")
        if text.startswith(SEPARATOR):
            raise InvalidPathError(path, "Candidate path must be relative")
        if _DRIVE_RE.match(text):
            raise InvalidPathError(path, "Candidate path must not carry a drive letter")

        parts = tuple(part for part in text.split(SEPARATOR) if part)
        for part in parts:
            if part in _DISALLOWED_PARTS:
                raise InvalidPathError(path, "Candidate path must not contain '.' or '..' segments")

        if is_directory is None:
            is_directory = text.endswith(SEPARATOR)
        return cls(parts=parts, is_directory=is_directory)

    @property
    def name(self) -> str:
        return self.parts[-1]

    def ancestors(self) -> list[CandidatePath]:
        """Parent directories, root first, excluding the path itself."""
        return [
            CandidatePath(parts=self.parts[:depth], is_directory=True)
            for depth in range(1, len(self.parts))
        ]

    def __str__(self) -> str:
        return SEPARATOR.join(self.parts)
