"""
Row module: one line of a document and its per-code-point highlighting.

Positions accepted by a Row are grapheme offsets. The highlight vector is
indexed by code point, so a cluster made of several code points owns several
highlight entries; rendering colors a cluster by its first code point.
"""

from typing import Final, Iterable, List, Optional

from .filetype import HighlightingOptions
from .highlighting import Highlighter, HighlightType, RESET_ESCAPE
from .position import SearchDirection
from .graphemes import codepoint_offsets, grapheme_count, split_graphemes

DEFAULT_TAB_WIDTH: Final[int] = 1


class Row:
    """A single line of text without its line terminator."""

    def __init__(self, string: str = '') -> None:
        self.string = string
        self.highlighting: List[HighlightType] = []
        self._len = grapheme_count(string)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"Row({self.string!r})"

    def is_empty(self) -> bool:
        """Whether the row holds no characters."""

        return self._len == 0

    def _set_string(self, string: str) -> None:
        # Highlighting is stale until the owner calls highlight() again.
        self.string = string
        self._len = grapheme_count(string)
        self.highlighting = []

    def insert(self, at: int, c: str) -> None:
        """Insert a character before the grapheme at ``at``, or append past the end."""

        if at >= self._len:
            self._set_string(self.string + c)
            return

        clusters = split_graphemes(self.string)
        clusters.insert(at, c)
        self._set_string(''.join(clusters))

    def delete(self, at: int) -> None:
        """Remove the grapheme at ``at``; out-of-range offsets are ignored."""

        if not 0 <= at < self._len:
            return

        clusters = split_graphemes(self.string)
        del clusters[at]
        self._set_string(''.join(clusters))

    def append(self, other: 'Row') -> None:
        """Concatenate another row onto the end of this one."""

        self._set_string(self.string + other.string)

    def split(self, at: int) -> 'Row':
        """
        Split the row at a grapheme offset.

        Args:
            at: Grapheme offset where the new row starts

        Returns:
            The right-hand part as a new, unhighlighted Row; this row keeps
            the left-hand part
        """

        clusters = split_graphemes(self.string)
        remainder = Row(''.join(clusters[at:]))
        self._set_string(''.join(clusters[:at]))

        return remainder

    def as_bytes(self) -> bytes:
        """UTF-8 encoding of the row's text."""

        return self.string.encode('utf-8')

    def render(self, start: int, end: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
        """
        Render a grapheme range for the terminal.

        A color escape is emitted only where the highlight category changes
        from the previous grapheme, and a reset closes the output if any color
        was emitted at all.

        Args:
            start: First grapheme to render
            end: Grapheme after the last one to render; clamped to the row
            tab_width: Number of spaces a tab expands to

        Returns:
            The visible characters interleaved with escape sequences
        """

        clusters = split_graphemes(self.string)
        end = max(0, min(end, len(clusters)))
        start = max(0, min(start, end))
        offsets = codepoint_offsets(clusters)

        parts: List[str] = []
        current = HighlightType.NONE
        colored = False

        for index in range(start, end):
            hl_type = self._highlight_at(offsets[index])
            if hl_type is not current:
                current = hl_type
                colored = True
                parts.append(hl_type.to_escape())

            cluster = clusters[index]
            parts.append(' ' * tab_width if cluster == '\t' else cluster)

        if colored:
            parts.append(RESET_ESCAPE)

        return ''.join(parts)

    def _highlight_at(self, codepoint: int) -> HighlightType:
        if codepoint < len(self.highlighting):
            return self.highlighting[codepoint]

        return HighlightType.NONE

    def find(self, query: str, at: int, direction: SearchDirection) -> Optional[int]:
        """
        Find query as a run of whole grapheme clusters.

        Forward searches ``[at, len)`` and returns the first match; Backward
        searches ``[0, at)`` and returns the last match that fits entirely
        before ``at``.

        Returns:
            The grapheme offset of the match, or None
        """

        if not query or not 0 <= at <= self._len:
            return None

        clusters = split_graphemes(self.string)
        needle = split_graphemes(query)

        if direction is SearchDirection.FORWARD:
            return _find_clusters(clusters, needle, at, self._len, direction)

        return _find_clusters(clusters, needle, 0, at, direction)

    def highlight(self, opts: HighlightingOptions, word: Optional[str] = None) -> None:
        """Recompute highlighting; occurrences of ``word`` take priority over syntax."""

        self.highlighting = Highlighter(opts).annotate(self.string)
        self._highlight_matches(word)

    def _highlight_matches(self, word: Optional[str]) -> None:
        if not word:
            return

        clusters = split_graphemes(self.string)
        needle = split_graphemes(word)
        offsets = codepoint_offsets(clusters)
        index = 0

        while True:
            found = _find_clusters(clusters, needle, index, len(clusters), SearchDirection.FORWARD)
            if found is None:
                break

            stop = found + len(needle)
            for codepoint in range(offsets[found], offsets[stop]):
                self.highlighting[codepoint] = HighlightType.MATCH
            index = stop


def _find_clusters(clusters: List[str], needle: List[str], start: int, end: int,
                   direction: SearchDirection) -> Optional[int]:
    """First (Forward) or last (Backward) match of needle lying inside ``[start, end)``."""

    candidates: Iterable[int] = range(start, end - len(needle) + 1)
    if direction is SearchDirection.BACKWARD:
        candidates = reversed(candidates)

    for index in candidates:
        if clusters[index:index + len(needle)] == needle:
            return index

    return None
