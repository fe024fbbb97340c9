import sys
from pathlib import Path
from typing import Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("GITIGNORE_RULES_FILE", raising=False)
    monkeypatch.delenv("GITIGNORE_RULES_IGNORE_CASE", raising=False)


@pytest.fixture
def write_tree() -> Callable[[Path, list[str]], None]:
    """Create files (and directories for entries ending in '/') under a root."""

    def _write(root: Path, entries: list[str]) -> None:
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")

    return _write


@pytest.fixture
def fake_repo(tmp_path: Path, write_tree) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    (root / ".gitignore").write_text(
        "# build output\n"
        "*.no\n"
        "not_me_either/\n"
        "/or_even_me\n"
        "\n"
        "*.log\n"
        "!keep.log\n",
        encoding="utf-8",
    )
    write_tree(
        root,
        [
            ".git/HEAD",
            "include_me",
            "also_include_me",
            "not_me.no",
            "or_even_me",
            "keep.log",
            "debug.log",
            "im_included/hello.greeting",
            "im_included/or_even_me",
            "not_me_either/not_me.neg",
            "a_dir/a_nested_dir/deeper_still/hello.greeting",
            "a_dir/a_nested_dir/deeper_still/bit_now_i_work.no",
            "empty_dir/",
        ],
    )
    return root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
