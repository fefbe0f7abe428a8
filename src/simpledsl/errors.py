"""Error types with formatted source context."""

from __future__ import annotations

from simpledsl.tokens import Position, Span, split_lines


class LexError(Exception):
    """Raised by strict tokenizing on the first unknown character."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return self.span.start

    def format(self, filename: str = "input.sdsl") -> str:
        lines = split_lines(self.source)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class ScannerMisuseError(RuntimeError):
    """Scanner protocol violation, e.g. pushing back into an occupied slot.

    This is a programming error in the caller, not a problem with the source.
    """

    def __init__(self, message: str, position: Position) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} (at {position.line}:{position.column})")


class FactoryError(ValueError):
    """Raised when a node factory is asked for a variant that does not exist."""
