"""Tests for the line-local highlight annotator."""

import pytest

from editcore.core import HighlightingError, HighlightingOptions, Highlighter, HighlightType
from editcore.core.highlighting import RESET_ESCAPE, is_separator

N = HighlightType.NONE
NUM = HighlightType.NUMBER
STR = HighlightType.STRING
CHR = HighlightType.CHARACTER
COM = HighlightType.COMMENT
KW1 = HighlightType.PRIMARY_KEYWORDS
KW2 = HighlightType.SECONDARY_KEYWORDS


def annotate(text, **options):
    return Highlighter(HighlightingOptions(**options)).annotate(text)


class TestNumbers:
    """Digit runs preceded by a separator."""

    def test_number_in_statement(self):
        result = annotate("let x = 42;", numbers=True, comments=True)
        assert result == [N] * 8 + [NUM, NUM] + [N]

    def test_decimal_point_continues_number(self):
        assert annotate("3.14", numbers=True) == [NUM] * 4

    def test_digit_after_letter_is_not_number(self):
        assert annotate("x42", numbers=True) == [N, N, N]

    def test_disabled(self):
        assert annotate("42") == [N, N]


class TestComments:
    """Line comments run to the end of the row."""

    def test_whole_line_comment(self):
        assert annotate("// comment", numbers=True, comments=True) == [COM] * 10

    def test_trailing_comment(self):
        assert annotate("x // 1", comments=True, numbers=True) == [N, N] + [COM] * 4

    def test_comment_swallows_string(self):
        assert annotate('// "x"', comments=True, strings=True) == [COM] * 6


class TestKeywords:
    """Whole-word keyword matching."""

    def test_keyword_followed_by_letter_is_not_matched(self):
        assert annotate("ifx", primary_keywords=("if",)) == [N, N, N]

    def test_standalone_keyword(self):
        assert annotate("if ", primary_keywords=("if",)) == [KW1, KW1, N]

    def test_keyword_at_end_of_line(self):
        assert annotate("x if", primary_keywords=("if",)) == [N, N, KW1, KW1]

    def test_keyword_preceded_by_letter_is_not_matched(self):
        assert annotate("xif", primary_keywords=("if",)) == [N, N, N]

    def test_punctuation_separates(self):
        assert annotate("(if)", primary_keywords=("if",)) == [N, KW1, KW1, N]

    def test_secondary_keywords(self):
        result = annotate("let n: u8", primary_keywords=("let",), secondary_keywords=("u8",))
        assert result == [KW1] * 3 + [N] * 4 + [KW2] * 2

    def test_primary_wins_over_secondary(self):
        assert annotate("int", primary_keywords=("int",), secondary_keywords=("int",)) == [KW1] * 3


class TestStringsAndCharacters:
    """String and character literals."""

    def test_string_with_escaped_quote(self):
        assert annotate('a "b\\"c" d', strings=True) == [N, N] + [STR] * 6 + [N, N]

    def test_unterminated_string_runs_to_end(self):
        assert annotate('"abc', strings=True) == [STR] * 4

    def test_string_hides_comment_marker(self):
        assert annotate('"a // b"', strings=True, comments=True) == [STR] * 8

    def test_character_literal(self):
        assert annotate("'a'", characters=True) == [CHR] * 3

    def test_escaped_character_literal(self):
        assert annotate("'\\n'", characters=True) == [CHR] * 4

    def test_two_characters_are_not_a_literal(self):
        assert annotate("'ab'", characters=True) == [N] * 4

    def test_all_disabled(self):
        assert annotate('"x" 1 // c') == [N] * 10


class TestEscapes:
    """Color escape sequences per category."""

    def test_none_resets(self):
        assert HighlightType.NONE.to_escape() == RESET_ESCAPE

    def test_number_color(self):
        assert HighlightType.NUMBER.to_escape() == "\x1b[38;2;220;163;163m"

    def test_every_category_has_escape(self):
        for hl_type in HighlightType:
            assert hl_type.to_escape().startswith("\x1b[")


def test_separators():
    assert is_separator(" ")
    assert is_separator("_")
    assert is_separator(";")
    assert not is_separator("a")
    assert not is_separator("é")


def test_highlighting_error_carries_lengths():
    error = HighlightingError("mismatch", expected=3, actual=2)
    assert isinstance(error, RuntimeError)
    assert (error.expected, error.actual) == (3, 2)
    with pytest.raises(RuntimeError):
        raise error
