"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from simpledsl.factory import SyntaxTree
from simpledsl.scanner import tokenize
from simpledsl.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str, skip_whitespace: bool = False) -> list[Token]:
        tokens = tokenize(source, skip_whitespace=skip_whitespace)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


@pytest.fixture
def tree() -> SyntaxTree:
    return SyntaxTree()


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
