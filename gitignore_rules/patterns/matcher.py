"""Structural glob matching over compiled pattern segments."""

from __future__ import annotations

import string
from typing import Callable, Sequence

from gitignore_rules.patterns.models import (
    ANY_SEGMENT,
    DOUBLE_STAR_SEGMENT,
    CharClass,
    GlobToken,
    PatternSegment,
    TokenKind,
)


POSIX_CLASSES: dict[str, Callable[[str], bool]] = {
    "alnum": str.isalnum,
    "alpha": str.isalpha,
    "blank": lambda ch: ch in " \t",
    "cntrl": lambda ch: ord(ch) < 32 or ord(ch) == 127,
    "digit": lambda ch: "0" <= ch <= "9",
    "graph": lambda ch: ch.isprintable() and not ch.isspace(),
    "lower": str.islower,
    "print": str.isprintable,
    "punct": lambda ch: ch in string.punctuation,
    "space": str.isspace,
    "upper": str.isupper,
    "xdigit": lambda ch: ch in string.hexdigits,
}


def _class_contains(char_class: CharClass, ch: str) -> bool:
    for start, end in char_class.ranges:
        if start <= ch <= end:
            return True
    return any(POSIX_CLASSES[name](ch) for name in char_class.named)


def _in_class(char_class: CharClass, ch: str, case_sensitive: bool) -> bool:
    candidates = (ch,) if case_sensitive else (ch, ch.lower(), ch.upper())
    found = any(_class_contains(char_class, item) for item in candidates)
    return found != char_class.negated


def _consume(token: GlobToken, name: str, pos: int, case_sensitive: bool) -> int | None:
    """Return how many characters ``token`` consumes at ``pos``, or None."""
    if token.kind == TokenKind.LITERAL:
        text = token.text if case_sensitive else token.text.lower()
        return len(text) if name.startswith(text, pos) else None
    if pos >= len(name):
        return None
    if token.kind == TokenKind.ANY_CHAR:
        return 1
    if token.kind == TokenKind.CHAR_CLASS and token.char_class is not None:
        return 1 if _in_class(token.char_class, name[pos], case_sensitive) else None
    return None


def match_segment(segment: PatternSegment, name: str, case_sensitive: bool = True) -> bool:
    """Match one path component against one pattern segment.

    ``*`` is resolved by backtracking to the most recent star only: every other
    token has a fixed width, so retrying the last star is enough.
    """
    if segment.double_star:
        return True
    if not case_sensitive:
        name = name.lower()
    if segment.is_literal:
        literal = segment.literal_text
        return name == (literal if case_sensitive else literal.lower())

    tokens = segment.tokens
    tok = pos = 0
    star_tok = star_pos = -1
    while True:
        if tok < len(tokens):
            token = tokens[tok]
            if token.kind == TokenKind.STAR:
                star_tok, star_pos = tok, pos
                tok += 1
                continue
            width = _consume(token, name, pos, case_sensitive)
            if width is not None:
                tok += 1
                pos += width
                continue
        elif pos == len(name):
            return True
        if star_tok < 0 or star_pos >= len(name):
            return False
        star_pos += 1
        tok, pos = star_tok + 1, star_pos


def match_segments(
    segments: Sequence[PatternSegment], parts: Sequence[str], case_sensitive: bool = True
) -> bool:
    """Match a full component sequence against a segment sequence.

    ``**`` segments match zero or more components. A trailing ``**`` matches
    one or more, so ``a/**`` covers everything inside ``a`` but not ``a``.
    """
    segments = tuple(segments)
    if not segments:
        return False
    if segments[-1].double_star:
        segments = segments[:-1] + (ANY_SEGMENT, DOUBLE_STAR_SEGMENT)

    seg = idx = 0
    star_seg = star_idx = -1
    while True:
        if seg < len(segments):
            segment = segments[seg]
            if segment.double_star:
                star_seg, star_idx = seg, idx
                seg += 1
                continue
            if idx < len(parts) and match_segment(segment, parts[idx], case_sensitive):
                seg += 1
                idx += 1
                continue
        elif idx == len(parts):
            return True
        if star_seg < 0 or star_idx >= len(parts):
            return False
        star_idx += 1
        seg, idx = star_seg + 1, star_idx


def match_any_component(
    segment: PatternSegment, parts: Sequence[str], case_sensitive: bool = True
) -> bool:
    return any(match_segment(segment, part, case_sensitive) for part in parts)
