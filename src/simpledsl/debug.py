"""Human-readable syntax tree dump."""

from __future__ import annotations

import sys
from typing import TextIO

from simpledsl.ast import (
    BinaryOp,
    Block,
    Constant,
    Expression,
    Function,
    FunctionCall,
    FunctionTable,
    IfStatement,
    ReturnStatement,
    Statement,
    Term,
    Variable,
)
from simpledsl.factory import SyntaxTree

_OPERATORS = {
    BinaryOp.ADD: "+",
    BinaryOp.SUBTRACT: "-",
    BinaryOp.LESS_THAN: "<",
}


def dump_tree(tree: SyntaxTree, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable syntax tree to *file*."""
    file.write("SyntaxTree\n")
    for func in tree.functions:
        _dump_function(func, tree.functions, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_function(func: Function, table: FunctionTable, depth: int, f: TextIO) -> None:
    params = ", ".join(func.param_names)
    f.write(f"{_indent(depth)}Function {func.name}({params})")
    if func.attributes:
        f.write(f" [{', '.join(func.attributes)}]")
    f.write("\n")
    if func.body is not None:
        _dump_block(func.body, func, table, depth + 1, f)


def _dump_block(
    block: Block, func: Function, table: FunctionTable, depth: int, f: TextIO
) -> None:
    f.write(f"{_indent(depth)}Block\n")
    for stmt in block.statements:
        _dump_statement(stmt, func, table, depth + 1, f)


def _dump_statement(
    stmt: Statement, func: Function, table: FunctionTable, depth: int, f: TextIO
) -> None:
    if isinstance(stmt, IfStatement):
        f.write(f"{_indent(depth)}If\n")
        if stmt.condition is not None:
            _dump_expression(stmt.condition, func, table, depth + 1, f)
        if stmt.then_block is not None:
            f.write(f"{_indent(depth)}Then\n")
            _dump_block(stmt.then_block, func, table, depth + 1, f)
        if stmt.else_block is not None:
            f.write(f"{_indent(depth)}Else\n")
            _dump_block(stmt.else_block, func, table, depth + 1, f)
    elif isinstance(stmt, ReturnStatement):
        f.write(f"{_indent(depth)}Return\n")
        if stmt.expression is not None:
            _dump_expression(stmt.expression, func, table, depth + 1, f)


def _dump_expression(
    expr: Expression, func: Function, table: FunctionTable, depth: int, f: TextIO
) -> None:
    op = _OPERATORS.get(expr.binary_op)
    f.write(f"{_indent(depth)}Expression {op}\n" if op else f"{_indent(depth)}Expression\n")
    for term in expr.operands():
        _dump_term(term, func, table, depth + 1, f)


def _dump_term(term: Term, func: Function, table: FunctionTable, depth: int, f: TextIO) -> None:
    if isinstance(term, Constant):
        f.write(f"{_indent(depth)}Constant({term.value})\n")
    elif isinstance(term, Variable):
        f.write(f"{_indent(depth)}Variable({_name_at(func.param_names, term.index)})\n")
    elif isinstance(term, FunctionCall):
        names = [fn.name for fn in table]
        f.write(f"{_indent(depth)}Call({_name_at(names, term.function_index)})\n")
        for arg in term.arguments:
            _dump_expression(arg, func, table, depth + 1, f)


def _name_at(names: list[str], idx: int) -> str:
    """Name at idx, or the raw index when it does not resolve."""
    if 0 <= idx < len(names):
        return names[idx]
    return f"#{idx}"
