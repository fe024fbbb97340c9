from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from gitignore_rules.constants import IGNORE_CASE_ENVVAR, IGNORE_FILENAME, RULES_FILE_ENVVAR
from gitignore_rules.errors import IgnoreRulesError, InvalidPathError
from gitignore_rules.evaluator import MatchOptions
from gitignore_rules.ignore_file import IgnoreFile
from gitignore_rules.logging_setup import configure_logging
from gitignore_rules.models import CheckRow
from gitignore_rules.tui import IgnoreConsoleUI


def _rules_source_options(func: Callable) -> Callable:
    decorators = [
        click.option(
            "--ignore-file",
            "-f",
            type=click.Path(path_type=Path, dir_okay=False),
            default=IGNORE_FILENAME,
            envvar=RULES_FILE_ENVVAR,
            show_default=True,
            help="Rules file in .gitignore syntax.",
        ),
        click.option(
            "--root",
            type=click.Path(path_type=Path, file_okay=False, exists=True),
            default=None,
            help="Directory the rules are relative to (defaults to the rules file's directory).",
        ),
        click.option(
            "--ignore-case",
            is_flag=True,
            envvar=IGNORE_CASE_ENVVAR,
            help="Match patterns case-insensitively.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _load_ignore_file(
    ignore_file: Path,
    root: Optional[Path],
    ignore_case: bool,
    ancestors: bool = True,
) -> IgnoreFile:
    resolved_root = (root if root is not None else ignore_file.parent).resolve()
    try:
        return IgnoreFile.from_path(
            ignore_file,
            root=resolved_root,
            options=MatchOptions(case_sensitive=not ignore_case),
            ancestors=ancestors,
        )
    except IgnoreRulesError as exc:
        raise click.ClickException(str(exc))


def _absolute_argument(value: str) -> str:
    if Path(value).is_absolute():
        return value
    absolute = (Path.cwd() / value).as_posix()
    return f"{absolute}/" if value.endswith("/") else absolute


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr.")
def cli(verbose: bool) -> None:
    """Match paths against .gitignore-style rules."""
    configure_logging(verbose)


@cli.command(help="Report whether each PATH is excluded by the rules.")
@click.argument("paths", nargs=-1, required=True)
@_rules_source_options
@click.option("--dir", "as_dir", is_flag=True, help="Treat every PATH as a directory.")
@click.option(
    "--no-ancestors",
    is_flag=True,
    help="Ignore exclusions inherited from parent directories.",
)
def check(
    paths: tuple[str, ...],
    ignore_file: Path,
    root: Optional[Path],
    ignore_case: bool,
    as_dir: bool,
    no_ancestors: bool,
) -> None:
    ui = IgnoreConsoleUI(Console())
    loaded = _load_ignore_file(ignore_file, root, ignore_case, ancestors=not no_ancestors)

    rows: list[CheckRow] = []
    errors: list[str] = []
    for path in paths:
        try:
            candidate = loaded.candidate(_absolute_argument(path), is_dir=True if as_dir else None)
            result = loaded.explain(candidate)
        except InvalidPathError as exc:
            errors.append(str(exc))
            continue
        rows.append(CheckRow(path=path, is_directory=candidate.is_directory, result=result))

    ui.render_check(rows, errors, source=str(ignore_file), rule_count=len(loaded.rule_set))
    if errors:
        raise click.exceptions.Exit(1)


@cli.command(help="List files and directories under the root that are not excluded.")
@_rules_source_options
@click.option("--flat", is_flag=True, help="Print one relative path per line.")
def tree(
    ignore_file: Path,
    root: Optional[Path],
    ignore_case: bool,
    flat: bool,
) -> None:
    loaded = _load_ignore_file(ignore_file, root, ignore_case)
    paths = loaded.included_files()
    if flat:
        for path in paths:
            click.echo(path)
        return
    IgnoreConsoleUI(Console()).render_tree(paths, root=str(loaded.root))


@cli.command(help="Show how each line of the rules file was compiled.")
@_rules_source_options
def rules(
    ignore_file: Path,
    root: Optional[Path],
    ignore_case: bool,
) -> None:
    ui = IgnoreConsoleUI(Console())
    loaded = _load_ignore_file(ignore_file, root, ignore_case)
    ui.render_rules(loaded.rule_set, source=str(ignore_file))


def main() -> int:
    try:
        # Non-standalone click returns the exit code of an explicit Exit.
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
