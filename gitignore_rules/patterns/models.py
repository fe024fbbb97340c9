"""Compiled pattern data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(str, Enum):
    LITERAL = "literal"
    ANY_CHAR = "any_char"
    STAR = "star"
    CHAR_CLASS = "char_class"


@dataclass(frozen=True)
class CharClass:
    """A bracket expression such as ``[a-z_]`` or ``[!0-9]``.

    ``ranges`` holds inclusive ``(start, end)`` pairs; a single character is
    stored as a pair with equal ends. ``named`` holds POSIX class names
    (``digit``, ``alpha``, ...).
    """

    ranges: tuple[tuple[str, str], ...] = ()
    named: tuple[str, ...] = ()
    negated: bool = False

    def describe(self) -> str:
        items: list[str] = []
        for start, end in self.ranges:
            items.append(start if start == end else f"{start}-{end}")
        items.extend(f"[:{name}:]" for name in self.named)
        prefix = "!" if self.negated else ""
        return f"[{prefix}{''.join(items)}]"


@dataclass(frozen=True)
class GlobToken:
    kind: TokenKind
    text: str = ""
    char_class: CharClass | None = None

    def describe(self) -> str:
        if self.kind == TokenKind.LITERAL:
            return self.text
        if self.kind == TokenKind.ANY_CHAR:
            return "?"
        if self.kind == TokenKind.STAR:
            return "*"
        if self.char_class is None:
            return ""
        return self.char_class.describe()


@dataclass(frozen=True)
class PatternSegment:
    """One ``/``-delimited piece of a pattern.

    A segment is either the cross-segment wildcard ``**`` or a sequence of
    glob tokens that applies to exactly one path component.
    """

    tokens: tuple[GlobToken, ...] = ()
    double_star: bool = False

    @property
    def is_literal(self) -> bool:
        return not self.double_star and all(
            token.kind == TokenKind.LITERAL for token in self.tokens
        )

    @property
    def literal_text(self) -> str:
        return "".join(token.text for token in self.tokens)

    def describe(self) -> str:
        if self.double_star:
            return "**"
        return "".join(token.describe() for token in self.tokens)


DOUBLE_STAR_SEGMENT = PatternSegment(double_star=True)
ANY_SEGMENT = PatternSegment(tokens=(GlobToken(kind=TokenKind.STAR),))


@dataclass(frozen=True)
class Rule:
    raw_text: str
    negated: bool = False
    directory_only: bool = False
    anchored: bool = False
    segments: tuple[PatternSegment, ...] = field(default_factory=tuple)

    @property
    def pattern(self) -> str:
        """Normalized pattern text, without the negation and directory markers."""
        body = "/".join(segment.describe() for segment in self.segments)
        if self.anchored and len(self.segments) == 1:
            return f"/{body}"
        return body

    @property
    def matches_nothing(self) -> bool:
        return not self.segments
