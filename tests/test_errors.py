from pathlib import Path

from gitignore_rules.errors import (
    IgnoreFileError,
    IgnoreFileReadError,
    IgnoreRulesError,
    InvalidPathError,
)


def test_invalid_path_error_message() -> None:
    error = InvalidPathError("a/../b", "Candidate path must not contain '.' or '..' segments")

    assert isinstance(error, IgnoreRulesError)
    assert error.path == "a/../b"
    assert str(error) == "Candidate path must not contain '.' or '..' segments: 'a/../b'"


def test_read_error_is_a_file_error() -> None:
    error = IgnoreFileReadError(Path("rules/.gitignore"), "No such file")

    assert isinstance(error, IgnoreFileError)
    assert error.detail == "No such file"
    assert str(error) == f"Cannot read ignore file (No such file): {Path('rules/.gitignore')}"
