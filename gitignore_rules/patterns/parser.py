"""Compile raw ignore lines into structured rules.

The compiler is total: any line that is not blank or a comment produces a
``Rule``. Malformed glob syntax degrades instead of failing:

* an unterminated ``[`` is a literal ``[`` character;
* ``**`` glued to other characters in one segment acts as a single ``*``;
* a dangling backslash at the end of a line is a literal backslash;
* a line that reduces to nothing (``!``, ``/``) yields a rule with no
  segments, which never matches.
"""

from __future__ import annotations

import logging

from gitignore_rules.constants import (
    COMMENT_PREFIX,
    ESCAPE_CHAR,
    NEGATION_PREFIX,
    SEPARATOR,
)
from gitignore_rules.patterns.matcher import POSIX_CLASSES
from gitignore_rules.patterns.models import (
    DOUBLE_STAR_SEGMENT,
    CharClass,
    GlobToken,
    PatternSegment,
    Rule,
    TokenKind,
)

logger = logging.getLogger(__name__)

# (character, escaped)
_Char = tuple[str, bool]

_TRAILING_WHITESPACE = " \t"
_CLASS_NEGATORS = ("!", "^")


def compile_rule(line: str) -> Rule | None:
    """Compile one ignore line; ``None`` for blank lines and comments."""
    text = line.rstrip("\r\n")
    stripped = text.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    chars = _scan(text.lstrip(), line)
    while chars and chars[-1][0] in _TRAILING_WHITESPACE and not chars[-1][1]:
        chars.pop()

    negated = bool(chars) and chars[0] == (NEGATION_PREFIX, False)
    if negated:
        chars.pop(0)
        while chars and chars[0][0].isspace() and not chars[0][1]:
            chars.pop(0)

    directory_only = False
    while chars and chars[-1] == (SEPARATOR, False):
        directory_only = True
        chars.pop()

    anchored = any(ch == SEPARATOR for ch, _ in chars)
    segments = _split_segments(chars, line)
    if not segments:
        logger.debug("Ignore line %r has an empty pattern and matches nothing", line)

    return Rule(
        raw_text=line,
        negated=negated,
        directory_only=directory_only,
        anchored=anchored,
        segments=segments,
    )


def _scan(text: str, line: str) -> list[_Char]:
    chars: list[_Char] = []
    index = 0
    while index < len(text):
        ch = text[index]
        if ch == ESCAPE_CHAR:
            if index + 1 < len(text):
                chars.append((text[index + 1], True))
                index += 2
                continue
            logger.debug("Ignore line %r ends with a dangling escape", line)
            chars.append((ESCAPE_CHAR, True))
            index += 1
            continue
        chars.append((ch, False))
        index += 1
    return chars


def _split_segments(chars: list[_Char], line: str) -> tuple[PatternSegment, ...]:
    pieces: list[list[_Char]] = [[]]
    for item in chars:
        if item[0] == SEPARATOR:
            pieces.append([])
        else:
            pieces[-1].append(item)

    segments: list[PatternSegment] = []
    for piece in pieces:
        if not piece:
            continue
        if piece == [("*", False), ("*", False)]:
            if segments and segments[-1].double_star:
                continue
            segments.append(DOUBLE_STAR_SEGMENT)
            continue
        segments.append(_compile_segment(piece, line))
    return tuple(segments)


def _compile_segment(piece: list[_Char], line: str) -> PatternSegment:
    tokens: list[GlobToken] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(GlobToken(kind=TokenKind.LITERAL, text="".join(literal)))
            literal.clear()

    index = 0
    while index < len(piece):
        ch, escaped = piece[index]
        if escaped:
            literal.append(ch)
            index += 1
            continue
        if ch == "*":
            flush()
            if tokens and tokens[-1].kind == TokenKind.STAR:
                logger.debug("Ignore line %r: consecutive '*' collapsed to one", line)
            else:
                tokens.append(GlobToken(kind=TokenKind.STAR))
            index += 1
        elif ch == "?":
            flush()
            tokens.append(GlobToken(kind=TokenKind.ANY_CHAR))
            index += 1
        elif ch == "[":
            parsed = _parse_class(piece, index + 1)
            if parsed is None:
                logger.debug("Ignore line %r: unterminated '[' treated as literal", line)
                literal.append(ch)
                index += 1
                continue
            char_class, index = parsed
            flush()
            tokens.append(GlobToken(kind=TokenKind.CHAR_CLASS, char_class=char_class))
        else:
            literal.append(ch)
            index += 1
    flush()
    return PatternSegment(tokens=tuple(tokens))


def _parse_class(piece: list[_Char], start: int) -> tuple[CharClass, int] | None:
    """Parse a bracket expression body starting after ``[``.

    Returns the class and the index just past the closing ``]``, or ``None``
    when the expression is never closed.
    """
    index = start
    negated = False
    if index < len(piece) and not piece[index][1] and piece[index][0] in _CLASS_NEGATORS:
        negated = True
        index += 1

    ranges: list[tuple[str, str]] = []
    named: list[str] = []
    first = True
    while index < len(piece):
        ch, escaped = piece[index]
        if ch == "]" and not escaped and not first:
            return CharClass(ranges=tuple(ranges), named=tuple(named), negated=negated), index + 1
        first = False

        if ch == "[" and not escaped:
            name_end = _named_class_end(piece, index)
            if name_end is not None:
                name = "".join(item[0] for item in piece[index + 2 : name_end])
                if name in POSIX_CLASSES:
                    named.append(name)
                    index = name_end + 2
                    continue

        if (
            index + 2 < len(piece)
            and piece[index + 1] == ("-", False)
            and piece[index + 2] != ("]", False)
        ):
            ranges.append((ch, piece[index + 2][0]))
            index += 3
        else:
            ranges.append((ch, ch))
            index += 1
    return None


def _named_class_end(piece: list[_Char], index: int) -> int | None:
    """Index of the ``:`` closing a ``[:name:]`` that opens at ``index``."""
    if index + 1 >= len(piece) or piece[index + 1] != (":", False):
        return None
    cursor = index + 2
    while cursor + 1 < len(piece):
        if piece[cursor] == (":", False) and piece[cursor + 1] == ("]", False):
            return cursor
        cursor += 1
    return None
