"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    UNKNOWN = auto()
    WHITESPACE = auto()

    # Content (carry text)
    IDENTIFIER = auto()  # letter (letter | digit | _)*
    NUMBER = auto()  # digit+

    # Structural (single-character)
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_CURLY = auto()  # {
    RIGHT_CURLY = auto()  # }
    LEFT_SQUARE = auto()  # [
    RIGHT_SQUARE = auto()  # ]
    LESS_THAN = auto()  # <
    PLUS = auto()  # +
    MINUS = auto()  # -
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;

    EOF = auto()


# Single-character punctuation -> token kind
PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_CURLY,
    "}": TokenKind.RIGHT_CURLY,
    "[": TokenKind.LEFT_SQUARE,
    "]": TokenKind.RIGHT_SQUARE,
    "<": TokenKind.LESS_THAN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme.

    ``text`` is the literal payload and is only filled in for identifiers and
    numbers. ``raw`` is every character the token consumed, whatever its kind.
    """

    kind: TokenKind
    text: str
    raw: str
    span: Span

    @property
    def has_more(self) -> bool:
        """False only for the end-of-input token."""
        return self.kind is not TokenKind.EOF


def split_lines(source: str) -> list[str]:
    """Split on \\n, \\r\\n and \\r only; a trailing terminator adds no empty line."""
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    return ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch.isalpha() or is_digit(ch) or ch == "_"
