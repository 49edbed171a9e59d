"""
Document module: an ordered list of rows tied to an optional file.

The document owns its rows exclusively. Every mutation re-highlights the rows
it touched under the active file type; out-of-range positions are ignored
rather than reported, so a stale cursor can never break an edit.
"""

import logging
from typing import List, Optional

from .filetype import FileType
from .position import Position, SearchDirection
from .row import Row

logger = logging.getLogger(__name__)


class Document:
    """Rows of text plus file association and change tracking."""

    def __init__(self, rows: Optional[List[Row]] = None, file_name: Optional[str] = None) -> None:
        self.rows: List[Row] = rows if rows is not None else []
        self.file_name = file_name
        self.changed = False
        self.file_type = FileType.from_file_name(file_name)

    @classmethod
    def open(cls, file_name: str) -> 'Document':
        """
        Load a document from a file.

        Line endings are decoded universally, so CRLF input yields rows
        without carriage returns. A trailing newline does not add a row.

        Args:
            file_name: Path of the file to read

        Returns:
            The highlighted, unchanged document

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """

        with open(file_name, 'r', encoding='utf-8') as f:
            contents = f.read()

        lines = contents.split('\n')
        if lines[-1] == '':
            lines.pop()

        document = cls([Row(line) for line in lines], file_name)
        document.highlight(None)

        logger.debug("Loaded %s: %d rows, file type %s",
                     file_name, len(document), document.file_type_name)

        return document

    def __len__(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        """Whether the document has no rows."""

        return not self.rows

    def row(self, index: int) -> Optional[Row]:
        """Get a row by index, or None past the end."""

        if 0 <= index < len(self.rows):
            return self.rows[index]

        return None

    @property
    def file_type_name(self) -> str:
        """Display name of the active file type."""

        return self.file_type.name

    def text(self) -> str:
        """The document content joined with newlines."""

        return '\n'.join(row.string for row in self.rows)

    def _is_valid(self, at: Position) -> bool:
        if at.x < 0 or at.y < 0 or at.y > len(self.rows):
            return False

        return at.y == len(self.rows) or at.x <= len(self.rows[at.y])

    def insert(self, at: Position, c: str) -> None:
        """
        Insert a character, or break the line when ``c`` is a newline.

        Inserting at ``y == len(document)`` creates a new row.
        """

        if not self._is_valid(at):
            return

        self.changed = True
        if c == '\n':
            self._insert_newline(at)
            return

        opts = self.file_type.highlighting_options()
        if at.y == len(self.rows):
            row = Row()
            row.insert(0, c)
            row.highlight(opts, None)
            self.rows.append(row)
            return

        row = self.rows[at.y]
        row.insert(at.x, c)
        row.highlight(opts, None)

    def _insert_newline(self, at: Position) -> None:
        if at.y == len(self.rows):
            self.rows.append(Row())
            return

        opts = self.file_type.highlighting_options()
        current_row = self.rows[at.y]
        new_row = current_row.split(at.x)
        current_row.highlight(opts, None)
        new_row.highlight(opts, None)
        self.rows.insert(at.y + 1, new_row)

        logger.debug("Split row %d at column %d", at.y, at.x)

    def delete(self, at: Position) -> None:
        """
        Delete the character at a position.

        At the end of any row but the last, the following row is merged into
        this one instead.
        """

        if at.y < 0 or at.y >= len(self.rows):
            return

        opts = self.file_type.highlighting_options()
        row = self.rows[at.y]

        if at.x == len(row) and at.y + 1 < len(self.rows):
            next_row = self.rows.pop(at.y + 1)
            row.append(next_row)
            row.highlight(opts, None)
            self.changed = True

            logger.debug("Merged row %d into row %d", at.y + 1, at.y)
            return

        if not 0 <= at.x < len(row):
            return

        row.delete(at.x)
        row.highlight(opts, None)
        self.changed = True

    def save(self, file_name: Optional[str] = None) -> None:
        """
        Write the document to disk.

        Args:
            file_name: Optional new name ("save as"). If None, uses the current name.

        Raises:
            OSError: If the file cannot be written
        """

        target = file_name or self.file_name
        if not target:
            return

        with open(target, 'wb') as f:
            for row in self.rows:
                f.write(row.as_bytes())
                f.write(b'\n')

        self.file_name = target
        self.file_type = FileType.from_file_name(self.file_name)
        self.highlight(None)
        self.changed = False

        logger.debug("Saved %d rows to %s", len(self.rows), self.file_name)

    def find(self, query: str, at: Position, direction: SearchDirection) -> Optional[Position]:
        """
        Search for query starting at a position.

        Forward scans rows ``at.y`` to the end. Backward covers rows ``0``
        through ``at.y``, visited from ``at.y`` upwards. Only the first row
        visited starts at ``at.x``; later rows are searched whole. The search
        never wraps around.

        Returns:
            Position of the first match in scan order, or None
        """

        if at.y < 0 or at.y >= len(self.rows):
            return None

        if direction is SearchDirection.FORWARD:
            start, end = at.y, len(self.rows)
        else:
            start, end = 0, at.y + 1

        x, y = at.x, at.y
        for _ in range(start, end):
            found = self.rows[y].find(query, x, direction)
            if found is not None:
                logger.debug("Found %r at %d:%d", query, y, found)
                return Position(found, y)

            if direction is SearchDirection.FORWARD:
                y += 1
                x = 0
            else:
                y = max(y - 1, 0)
                x = len(self.rows[y])

        return None

    def highlight(self, word: Optional[str]) -> None:
        """Re-highlight every row, marking occurrences of ``word`` if given."""

        opts = self.file_type.highlighting_options()
        for row in self.rows:
            row.highlight(opts, word)
