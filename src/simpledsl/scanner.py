"""SimpleDSL scanner: pulls classified tokens from source text on demand."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from simpledsl.errors import LexError, ScannerMisuseError
from simpledsl.tokens import (
    PUNCTUATION,
    Position,
    Span,
    Token,
    TokenKind,
    is_digit,
    is_ident_char,
    is_ident_start,
    split_lines,
)


class Scanner:
    """Character-level scanner with one character of pushback.

    The source is held as a list of lines. A single ``"\\n"`` is produced
    between consecutive lines, so a line break always ends a token. Whitespace
    is returned as a token of its own; use :meth:`next_significant_token` to
    skip it.
    """

    def __init__(self, source: str = "") -> None:
        self.initialize(source)

    def initialize(self, source: str) -> None:
        """Start scanning a fresh unit, discarding any previous state."""
        self._source = source
        self._lines = split_lines(source)
        self._line = 0  # 0-based index into self._lines
        self._col = 1
        self._pushback: str | None = None
        self._pushback_pos: Position | None = None
        self._last_pos = Position(1, 1)

    @property
    def source(self) -> str:
        return self._source

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def current_location(self) -> Position:
        """Position of the next character to be consumed."""
        if self._pushback_pos is not None:
            return self._pushback_pos
        return Position(self._line + 1, self._col)

    def is_at_end(self) -> bool:
        return self._pushback is None and self._cursor_at_end()

    def _cursor_at_end(self) -> bool:
        if not self._lines:
            return True
        last = len(self._lines) - 1
        return self._line >= last and self._col > len(self._lines[last])

    # ------------------------------------------------------------------
    # Character stream
    # ------------------------------------------------------------------

    def _get_char(self) -> str | None:
        if self._pushback is not None:
            ch = self._pushback
            self._last_pos = self.current_location()
            self._pushback = None
            self._pushback_pos = None
            return ch

        if self._cursor_at_end():
            return None

        self._last_pos = Position(self._line + 1, self._col)
        line = self._lines[self._line]
        if self._col <= len(line):
            ch = line[self._col - 1]
            self._col += 1
            return ch

        # Past the last character of a line that is not the last one
        self._line += 1
        self._col = 1
        return "\n"

    def push_back(self, ch: str) -> None:
        """Return one character to the stream; the next pull yields it first."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ScannerMisuseError(
                f"pushback takes exactly one character, got {ch!r}", self.current_location()
            )
        if self._pushback is not None:
            raise ScannerMisuseError(
                "pushback buffer is already occupied", self.current_location()
            )
        self._pushback = ch
        self._pushback_pos = self._last_pos

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume a maximal run of characters satisfying predicate."""
        chars = []
        while True:
            ch = self._get_char()
            if ch is None:
                break
            if not predicate(ch):
                self.push_back(ch)
                break
            chars.append(ch)
        return "".join(chars)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token, EOF once input is exhausted."""
        start = self.current_location()
        ch = self._get_char()

        if ch is None:
            return self._token(TokenKind.EOF, "", "", start)

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            return self._token(kind, "", ch, start)

        if is_ident_start(ch):
            text = ch + self._take_while(is_ident_char)
            return self._token(TokenKind.IDENTIFIER, text, text, start)

        if is_digit(ch):
            text = ch + self._take_while(is_digit)
            return self._token(TokenKind.NUMBER, text, text, start)

        if ch.isspace():
            raw = ch + self._take_while(str.isspace)
            return self._token(TokenKind.WHITESPACE, "", raw, start)

        return self._token(TokenKind.UNKNOWN, "", ch, start)

    def next_significant_token(self) -> Token:
        """Return the next token that is not whitespace."""
        while True:
            tok = self.next_token()
            if tok.kind is not TokenKind.WHITESPACE:
                return tok

    def _token(self, kind: TokenKind, text: str, raw: str, start: Position) -> Token:
        return Token(kind, text, raw, Span(start, self.current_location()))

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if not tok.has_more:
                return


def tokenize(
    source: str, *, skip_whitespace: bool = False, strict: bool = False
) -> list[Token]:
    """Convenience function: scan source to the end and return the token list.

    The list always ends with the EOF token. With ``strict`` the first unknown
    character raises :class:`LexError` instead of producing an UNKNOWN token.
    """
    scanner = Scanner(source)
    tokens: list[Token] = []
    while True:
        if skip_whitespace:
            tok = scanner.next_significant_token()
        else:
            tok = scanner.next_token()
        if strict and tok.kind is TokenKind.UNKNOWN:
            raise LexError(f"unknown character {tok.raw!r}", tok.span, source)
        tokens.append(tok)
        if not tok.has_more:
            return tokens
