from pathlib import PurePosixPath, PureWindowsPath

import pytest

from gitignore_rules.errors import InvalidPathError
from gitignore_rules.paths import CandidatePath


def test_parse_splits_components() -> None:
    candidate = CandidatePath.parse("src/app/main.py")

    assert candidate.parts == ("src", "app", "main.py")
    assert candidate.is_directory is False
    assert candidate.name == "main.py"
    assert str(candidate) == "src/app/main.py"


def test_trailing_slash_marks_directory() -> None:
    assert CandidatePath.parse("build/").is_directory is True
    assert CandidatePath.parse("build/", is_directory=False).is_directory is False


def test_repeated_slashes_collapse() -> None:
    assert CandidatePath.parse("a//b").parts == ("a", "b")


def test_pure_paths_are_accepted() -> None:
    assert CandidatePath.parse(PurePosixPath("a/b")).parts == ("a", "b")
    assert CandidatePath.parse(PureWindowsPath("a\\b")).parts == ("a", "b")


def test_ancestors_are_directories_root_first() -> None:
    candidate = CandidatePath.parse("a/b/c.txt")

    assert candidate.ancestors() == [
        CandidatePath(parts=("a",), is_directory=True),
        CandidatePath(parts=("a", "b"), is_directory=True),
    ]
    assert CandidatePath.parse("top").ancestors() == []


@pytest.mark.parametrize(
    ("path", "message"),
    [
        ("", "Empty"),
        ("/abs", "relative"),
        ("D:/data", "drive"),
        ("d:\\data", "drive"),
        ("C:", "drive"),
        ("a/./b", "'.' or '..'"),
        ("..", "'.' or '..'"),
    ],
)
def test_invalid_paths(path: str, message: str) -> None:
    with pytest.raises(InvalidPathError, match=message) as excinfo:
        CandidatePath.parse(path)

    assert excinfo.value.path == path


def test_colon_after_first_letter_is_an_ordinary_name() -> None:
    candidate = CandidatePath.parse("c:notes.txt")

    assert candidate.parts == ("c:notes.txt",)
    assert candidate.is_directory is False
