"""
Core package for document storage, editing and highlighting.

This package implements the editing core: the Document and Row classes that
store text and apply grapheme-accurate edits, the Highlighter that annotates
each character of a row, and the FileType policy that picks the highlighting
profile for a file name.
"""

from .document import Document
from .errors import HighlightingError
from .filetype import FileType, HighlightingOptions, register_file_type
from .highlighting import Highlighter, HighlightType
from .position import Position, SearchDirection
from .row import Row

__all__ = [
    'Document',
    'FileType',
    'HighlightingError',
    'HighlightingOptions',
    'Highlighter',
    'HighlightType',
    'Position',
    'Row',
    'SearchDirection',
    'register_file_type',
]
