"""Test strict-mode errors, position accuracy, and context snippets."""

import pytest

from simpledsl.errors import FactoryError, LexError, ScannerMisuseError
from simpledsl.scanner import tokenize
from simpledsl.tokens import Position


class TestStrictTokenize:
    def test_unknown_raises(self):
        with pytest.raises(LexError, match="unknown character '@'"):
            tokenize("a @ b", strict=True)

    def test_clean_source_passes(self):
        tokens = tokenize("f(a, 1) < 2;", strict=True)
        assert tokens[-1].has_more is False

    def test_non_strict_does_not_raise(self):
        tokens = tokenize("a @ b")
        assert len(tokens) == 6


class TestErrorPositions:
    def test_position_on_first_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("abc $ rest", strict=True)
        err = exc_info.value
        assert err.position == Position(1, 5)

    def test_error_on_second_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("line one\n#", strict=True)
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 1


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("some text ? more text", strict=True)
        formatted = exc_info.value.format()
        assert "some text ? more text" in formatted

    def test_format_contains_carets(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("  ?", strict=True)
        formatted = exc_info.value.format()
        assert formatted.splitlines()[-1].endswith("   ^")

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?", strict=True)
        assert exc_info.value.format().startswith("error:")

    def test_format_with_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("?", strict=True)
        formatted = exc_info.value.format("prog.sdsl")
        assert "prog.sdsl:1:1" in formatted

    def test_multiline_error_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("a\nb\n=", strict=True)
        assert "3:1" in exc_info.value.format()


class TestProgrammingErrors:
    def test_misuse_message_has_position(self):
        err = ScannerMisuseError("pushback buffer is already occupied", Position(2, 7))
        assert "2:7" in str(err)
        assert isinstance(err, RuntimeError)

    def test_factory_error_is_value_error(self):
        assert issubclass(FactoryError, ValueError)

    def test_form_feed_does_not_shift_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("a\fb ?", strict=True)
        err = exc_info.value
        assert err.position == Position(1, 5)
        assert "1:5" in err.format()
