"""
Incremental search over a document.

A SearchEngine drives one interactive search: every change to the query
re-runs the search from the cursor and re-highlights the matches, and the
session ends by either keeping the found position or restoring the cursor.
"""

import logging
from typing import List, Optional

from ..core.document import Document
from ..core.position import Position, SearchDirection
from ..core.graphemes import grapheme_count

logger = logging.getLogger(__name__)


class SearchResult:
    """Represents a search result with position and match information."""

    def __init__(self, position: Position, length: int, match: str):
        self.position = position
        self.length = length
        self.match = match

    def __repr__(self) -> str:
        return f"SearchResult({self.position!r}, {self.length}, {self.match!r})"


class SearchEngine:
    """Handles one incremental search session on a document."""

    def __init__(self, document: Document, cursor: Position) -> None:
        self.document = document
        self.cursor = cursor
        self.origin = cursor
        self.last_query: Optional[str] = None

    def update(self, query: str, direction: SearchDirection = SearchDirection.FORWARD,
               advance: bool = False) -> Optional[SearchResult]:
        """
        Search for query from the cursor and move the cursor to the hit.

        Args:
            query: Text to look for
            direction: Search direction
            advance: Step one character right before searching, so a repeated
                     forward search does not find the match under the cursor

        Returns:
            Optional[SearchResult]: The match, or None if nothing was found
        """

        self.last_query = query
        moved = False

        if advance:
            stepped = self._step_right(self.cursor)
            moved = stepped != self.cursor
            self.cursor = stepped

        position = self.document.find(query, self.cursor, direction)
        result = None

        if position is not None:
            self.cursor = position
            result = SearchResult(position, grapheme_count(query), query)
        elif moved:
            self.cursor = self._step_left(self.cursor)

        self.document.highlight(query)

        return result

    def find_next(self, query: Optional[str] = None) -> Optional[SearchResult]:
        """Find the next occurrence after the cursor (defaults to the last query)."""

        query = query if query is not None else self.last_query
        if not query:
            return None

        return self.update(query, SearchDirection.FORWARD, advance=True)

    def find_previous(self, query: Optional[str] = None) -> Optional[SearchResult]:
        """Find the previous occurrence before the cursor (defaults to the last query)."""

        query = query if query is not None else self.last_query
        if not query:
            return None

        return self.update(query, SearchDirection.BACKWARD)

    def find_all(self, query: str) -> List[SearchResult]:
        """
        Find all non-overlapping occurrences of query in document order.

        Args:
            query: Text to look for

        Returns:
            List[SearchResult]: All matches found
        """

        if not query:
            return []

        length = grapheme_count(query)
        results = []

        for y, row in enumerate(self.document.rows):
            x = 0
            while True:
                found = row.find(query, x, SearchDirection.FORWARD)
                if found is None:
                    break

                results.append(SearchResult(Position(found, y), length, query))
                x = found + length

        return results

    def finish(self, accepted: bool) -> Position:
        """
        End the session and clear search highlighting.

        Args:
            accepted: False when the search was cancelled

        Returns:
            Position: Where the cursor ends up
        """

        if not accepted:
            self.cursor = self.origin

        self.document.highlight(None)
        logger.debug("Search finished at %d:%d (accepted=%s)",
                     self.cursor.y, self.cursor.x, accepted)

        return self.cursor

    def _step_right(self, position: Position) -> Position:
        row = self.document.row(position.y)
        width = len(row) if row is not None else 0

        if position.x < width:
            return Position(position.x + 1, position.y)

        if position.y < len(self.document):
            return Position(0, position.y + 1)

        return position

    def _step_left(self, position: Position) -> Position:
        if position.x > 0:
            return Position(position.x - 1, position.y)

        if position.y > 0:
            row = self.document.row(position.y - 1)
            return Position(len(row) if row is not None else 0, position.y - 1)

        return position
