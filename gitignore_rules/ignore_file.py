"""Load a single ignore file and query paths against it."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath
from typing import Iterable

from gitignore_rules.constants import GIT_DIRNAME, SEPARATOR
from gitignore_rules.errors import InvalidPathError
from gitignore_rules.evaluator import (
    Evaluator,
    MatchOptions,
    MatchResult,
    PathLike,
    Verdict,
    as_candidate,
)
from gitignore_rules.paths import CandidatePath
from gitignore_rules.ruleset import RuleSet, build_rule_set
from gitignore_rules.utils import read_rule_lines, relative_to_root

logger = logging.getLogger(__name__)


class IgnoreFile:
    """Rules from one gitignore-style source, bound to an optional root.

    The root is used to relativize absolute paths, to stat paths whose
    directory-ness the caller leaves open, and to walk the tree in
    ``included_files``. With ``ancestors`` enabled a path inside an excluded
    directory is excluded too, as Git does.
    """

    def __init__(
        self,
        rule_set: RuleSet,
        root: Path | None = None,
        source: Path | None = None,
        options: MatchOptions | None = None,
        ancestors: bool = True,
    ) -> None:
        self._rule_set = rule_set
        self._root = root
        self._source = source
        self._evaluator = Evaluator(options)
        self._ancestors = ancestors

    @classmethod
    def from_path(
        cls,
        path: Path,
        root: Path | None = None,
        options: MatchOptions | None = None,
        ancestors: bool = True,
    ) -> IgnoreFile:
        rule_set = build_rule_set(read_rule_lines(path))
        logger.debug("Loaded %d rules from %s", len(rule_set), path)
        return cls(
            rule_set,
            root=root if root is not None else path.parent,
            source=path,
            options=options,
            ancestors=ancestors,
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        root: Path | None = None,
        options: MatchOptions | None = None,
        ancestors: bool = True,
    ) -> IgnoreFile:
        return cls.from_lines(text.splitlines(), root=root, options=options, ancestors=ancestors)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        root: Path | None = None,
        options: MatchOptions | None = None,
        ancestors: bool = True,
    ) -> IgnoreFile:
        return cls(build_rule_set(lines), root=root, options=options, ancestors=ancestors)

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def root(self) -> Path | None:
        return self._root

    @property
    def source(self) -> Path | None:
        return self._source

    def candidate(self, path: PathLike, is_dir: bool | None = None) -> CandidatePath:
        if isinstance(path, CandidatePath):
            return as_candidate(path, is_dir)

        raw = path if isinstance(path, str) else PurePath(path).as_posix()
        marked_dir = raw.endswith(SEPARATOR)
        if Path(raw).is_absolute():
            if self._root is None:
                raise InvalidPathError(raw, "Absolute path given without an ignore root")
            relative = relative_to_root(Path(raw), self._root)
            if relative is None:
                raise InvalidPathError(raw, "Path is outside the ignore root")
            raw = relative.as_posix() + (SEPARATOR if marked_dir else "")

        candidate = CandidatePath.parse(raw, is_directory=is_dir)
        if is_dir is None and not marked_dir and self._root is not None:
            on_disk = (self._root / str(candidate)).is_dir()
            candidate = as_candidate(candidate, on_disk)
        return candidate

    def explain(self, path: PathLike, is_dir: bool | None = None) -> MatchResult:
        candidate = self.candidate(path, is_dir)
        if self._ancestors:
            return self._evaluator.explain_with_ancestors(self._rule_set, candidate)
        return self._evaluator.explain(self._rule_set, candidate)

    def matches(self, path: PathLike, is_dir: bool | None = None) -> Verdict:
        return self.explain(path, is_dir).verdict

    def is_excluded(self, path: PathLike, is_dir: bool | None = None) -> bool:
        return self.matches(path, is_dir) == Verdict.EXCLUDED

    def included_files(self) -> list[str]:
        """Relative paths of every entry under the root that is not excluded.

        Excluded directories are pruned without being listed; ``.git`` is
        always skipped.
        """
        if self._root is None:
            raise ValueError("included_files() requires an ignore root")

        root = self._root
        results: list[str] = []
        for current, dir_names, file_names in os.walk(str(root), topdown=True):
            rel_dir = Path(current).relative_to(root)
            rel_parts = rel_dir.parts

            kept: list[str] = []
            for name in sorted(dir_names):
                if name == GIT_DIRNAME:
                    continue
                rel = (rel_dir / name).as_posix()
                if self._walked_entry_excluded(rel_parts + (name,), is_dir=True):
                    logger.debug("Pruning excluded directory %s", rel)
                    continue
                kept.append(name)
                results.append(rel)
            dir_names[:] = kept

            for name in sorted(file_names):
                rel = (rel_dir / name).as_posix()
                if not self._walked_entry_excluded(rel_parts + (name,), is_dir=False):
                    results.append(rel)

        return sorted(results)

    def _walked_entry_excluded(self, parts: tuple[str, ...], is_dir: bool) -> bool:
        # Names from the walk are already single components; skip string parsing.
        candidate = CandidatePath(parts=parts, is_directory=is_dir)
        return self.explain(candidate).excluded

    def __repr__(self) -> str:
        return f"IgnoreFile(source={self._source!r}, root={self._root!r}, rules={len(self._rule_set)})"
