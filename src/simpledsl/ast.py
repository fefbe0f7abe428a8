"""AST node types for SimpleDSL programs.

Nodes are mutable while a parser assembles them and are treated as read-only
afterwards. Every parent owns its children outright; nothing is shared.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TermKind(Enum):
    CONSTANT = auto()
    VARIABLE = auto()
    FUNCTION_CALL = auto()


class StatementKind(Enum):
    IF = auto()
    RETURN = auto()


class BinaryOp(Enum):
    NONE = auto()
    ADD = auto()  # +
    SUBTRACT = auto()  # -
    LESS_THAN = auto()  # <


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Constant:
    """Integer literal."""

    kind: ClassVar[TermKind] = TermKind.CONSTANT

    value: int = 0


@dataclass(slots=True)
class Variable:
    """Reference to a parameter, by index into the owning function's params."""

    kind: ClassVar[TermKind] = TermKind.VARIABLE

    index: int = 0


@dataclass(slots=True)
class FunctionCall:
    """Call of the function at ``function_index`` in the function table."""

    kind: ClassVar[TermKind] = TermKind.FUNCTION_CALL

    function_index: int = 0
    arguments: list[Expression] = field(default_factory=list)


Term = Constant | Variable | FunctionCall


@dataclass(slots=True)
class Expression:
    """One term, or two terms joined by a binary operator.

    ``term2`` is ignored whenever ``binary_op`` is ``BinaryOp.NONE``.
    """

    term1: Term | None = None
    term2: Term | None = None
    binary_op: BinaryOp = BinaryOp.NONE

    def operands(self) -> tuple[Term, ...]:
        """Return the terms that take part in the expression."""
        if self.term1 is None:
            return ()
        if self.binary_op is BinaryOp.NONE or self.term2 is None:
            return (self.term1,)
        return (self.term1, self.term2)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class IfStatement:
    """``if`` with a then block and an optional else block.

    ``else_block`` is None when there is no else clause; an empty Block means
    an else clause with no statements.
    """

    kind: ClassVar[StatementKind] = StatementKind.IF

    condition: Expression | None = None
    then_block: Block | None = None
    else_block: Block | None = None


@dataclass(slots=True)
class ReturnStatement:
    kind: ClassVar[StatementKind] = StatementKind.RETURN

    expression: Expression | None = None


Statement = IfStatement | ReturnStatement


@dataclass(slots=True)
class Block:
    """Statements executed in list order."""

    statements: list[Statement] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Function:
    """A function definition.

    ``param_names`` defines both the arity and the namespace that Variable
    indices refer to. Attributes are free-form tags kept in source order.
    """

    name: str = ""
    attributes: list[str] = field(default_factory=list)
    param_names: list[str] = field(default_factory=list)
    body: Block | None = None

    @property
    def arity(self) -> int:
        return len(self.param_names)


class FunctionTable:
    """Append-only, ordered collection of functions with name lookup."""

    NOT_FOUND: ClassVar[int] = -1

    __slots__ = ("_functions",)

    def __init__(self) -> None:
        self._functions: list[Function] = []

    def add(self, func: Function) -> int:
        """Append func and return its index."""
        self._functions.append(func)
        return len(self._functions) - 1

    def index_of(self, name: str) -> int:
        """Index of the first function named ``name`` (case-insensitive).

        Returns NOT_FOUND when no function matches.
        """
        folded = name.casefold()
        for idx, func in enumerate(self._functions):
            if func.name.casefold() == folded:
                return idx
        return self.NOT_FOUND

    def __getitem__(self, idx: int) -> Function:
        # Negative indices are rejected so NOT_FOUND never selects a function
        if idx < 0:
            raise IndexError(f"function index out of range: {idx}")
        return self._functions[idx]

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[Function]:
        return iter(self._functions)

    def __repr__(self) -> str:
        names = ", ".join(f.name for f in self._functions)
        return f"FunctionTable([{names}])"
