"""SimpleDSL compiler front end: scanner and syntax-tree model."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simpledsl.tokens import Token

__version__ = "0.1.0"


def scan(source: str, skip_whitespace: bool = True) -> list[Token]:
    """Tokenize SimpleDSL source, by default without whitespace tokens."""
    from simpledsl.scanner import tokenize

    return tokenize(source, skip_whitespace=skip_whitespace)
