"""
EditCore - text buffer and highlighting engine for terminal editors.
"""

__version__ = "0.1.0"
