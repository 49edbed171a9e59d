"""
Utility package for interactive search support.
"""

from .search import SearchEngine, SearchResult

__all__ = [
    'SearchEngine',
    'SearchResult'
]
