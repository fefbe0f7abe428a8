"""Node factory and syntax-tree root."""

from __future__ import annotations

from simpledsl.ast import (
    Block,
    Constant,
    Expression,
    Function,
    FunctionCall,
    FunctionTable,
    IfStatement,
    ReturnStatement,
    Statement,
    StatementKind,
    Term,
    TermKind,
    Variable,
)
from simpledsl.errors import FactoryError

# Variant tag -> node class
_STATEMENTS: dict[StatementKind, type[IfStatement] | type[ReturnStatement]] = {
    StatementKind.IF: IfStatement,
    StatementKind.RETURN: ReturnStatement,
}

_TERMS: dict[TermKind, type[Constant] | type[Variable] | type[FunctionCall]] = {
    TermKind.CONSTANT: Constant,
    TermKind.VARIABLE: Variable,
    TermKind.FUNCTION_CALL: FunctionCall,
}


class ASTFactory:
    """Creates empty-shelled nodes for a parser to fill in."""

    def create_block(self) -> Block:
        return Block()

    def create_expression(self) -> Expression:
        return Expression()

    def create_function(self) -> Function:
        return Function()

    def create_statement(self, kind: StatementKind) -> Statement:
        try:
            cls = _STATEMENTS[kind]
        except (KeyError, TypeError):
            raise FactoryError(f"unexpected statement kind: {kind!r}") from None
        return cls()

    def create_term(self, kind: TermKind) -> Term:
        try:
            cls = _TERMS[kind]
        except (KeyError, TypeError):
            raise FactoryError(f"unexpected term kind: {kind!r}") from None
        return cls()


class SyntaxTree(ASTFactory):
    """Root of a compilation unit: the factory plus the function table it fills."""

    def __init__(self) -> None:
        self.functions = FunctionTable()

    def __repr__(self) -> str:
        return f"SyntaxTree({self.functions!r})"
