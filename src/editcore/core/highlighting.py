"""
Highlight categories and the line-local annotator that assigns them.

The annotator is a single left-to-right pass over the code points of one row.
It keeps no state between rows, so a string or comment left open at the end
of a line does not continue on the next one.
"""

import string
from enum import Enum
from typing import Callable, Dict, Final, FrozenSet, List, Sequence, Tuple

from .errors import HighlightingError
from .filetype import HighlightingOptions


class HighlightType(Enum):
    """Highlight category of a single code point."""
    NONE = 'none'
    NUMBER = 'number'
    MATCH = 'match'
    STRING = 'string'
    CHARACTER = 'character'
    COMMENT = 'comment'
    PRIMARY_KEYWORDS = 'primary_keywords'
    SECONDARY_KEYWORDS = 'secondary_keywords'

    def to_escape(self) -> str:
        """Terminal escape sequence that switches the foreground to this category."""

        if self is HighlightType.NONE:
            return RESET_ESCAPE

        red, green, blue = HIGHLIGHT_COLORS[self]
        return f"\x1b[38;2;{red};{green};{blue}m"


HIGHLIGHT_COLORS: Final[Dict[HighlightType, Tuple[int, int, int]]] = {
    HighlightType.NUMBER: (220, 163, 163),
    HighlightType.MATCH: (38, 139, 210),
    HighlightType.STRING: (211, 54, 130),
    HighlightType.CHARACTER: (108, 113, 196),
    HighlightType.COMMENT: (133, 153, 0),
    HighlightType.PRIMARY_KEYWORDS: (181, 137, 0),
    HighlightType.SECONDARY_KEYWORDS: (42, 161, 152),
}

RESET_ESCAPE: Final[str] = "\x1b[39m"

SEPARATORS: Final[FrozenSet[str]] = frozenset(string.punctuation + string.whitespace)


def is_separator(char: str) -> bool:
    """Whether a code point ends a word: ASCII punctuation or whitespace."""

    return char in SEPARATORS


class Highlighter:
    """Classifies every code point of a row for one file-type profile."""

    def __init__(self, options: HighlightingOptions) -> None:
        self.options = options

    def annotate(self, text: str) -> List[HighlightType]:
        """
        Compute one highlight category per code point of text.

        Args:
            text: The row content

        Returns:
            A list with exactly ``len(text)`` entries
        """

        recognizers: Sequence[Tuple[Callable[[str, int], int], HighlightType]] = (
            (self._match_character, HighlightType.CHARACTER),
            (self._match_comment, HighlightType.COMMENT),
            (self._match_primary_keyword, HighlightType.PRIMARY_KEYWORDS),
            (self._match_secondary_keyword, HighlightType.SECONDARY_KEYWORDS),
            (self._match_string, HighlightType.STRING),
            (self._match_number, HighlightType.NUMBER),
        )

        highlighting: List[HighlightType] = []
        index = 0

        while index < len(text):
            for recognizer, hl_type in recognizers:
                length = recognizer(text, index)
                if length:
                    highlighting.extend([hl_type] * length)
                    index += length
                    break
            else:
                highlighting.append(HighlightType.NONE)
                index += 1

        if len(highlighting) != len(text):
            raise HighlightingError(
                "Highlight vector does not match row length",
                expected=len(text),
                actual=len(highlighting),
            )

        return highlighting

    def _match_character(self, text: str, index: int) -> int:
        if not self.options.characters or text[index] != "'":
            return 0

        if index + 1 >= len(text):
            return 0

        closing = index + 3 if text[index + 1] == '\\' else index + 2
        if closing < len(text) and text[closing] == "'":
            return closing - index + 1

        return 0

    def _match_comment(self, text: str, index: int) -> int:
        if self.options.comments and text.startswith('//', index):
            return len(text) - index

        return 0

    def _match_primary_keyword(self, text: str, index: int) -> int:
        return self._match_keywords(text, index, self.options.primary_keywords)

    def _match_secondary_keyword(self, text: str, index: int) -> int:
        return self._match_keywords(text, index, self.options.secondary_keywords)

    def _match_keywords(self, text: str, index: int, keywords: Sequence[str]) -> int:
        if index > 0 and not is_separator(text[index - 1]):
            return 0

        for word in keywords:
            if not word or not text.startswith(word, index):
                continue

            end = index + len(word)
            if end < len(text) and not is_separator(text[end]):
                continue

            return len(word)

        return 0

    def _match_string(self, text: str, index: int) -> int:
        if not self.options.strings or text[index] != '"':
            return 0

        end = index + 1
        while end < len(text):
            char = text[end]
            if char == '\\':
                end += 2
                continue

            end += 1
            if char == '"':
                break

        return min(end, len(text)) - index

    def _match_number(self, text: str, index: int) -> int:
        if not self.options.numbers or text[index] not in string.digits:
            return 0

        if index > 0 and not is_separator(text[index - 1]):
            return 0

        end = index + 1
        while end < len(text) and (text[end] in string.digits or text[end] == '.'):
            end += 1

        return end - index
