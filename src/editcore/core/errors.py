"""
Exceptions raised by the editing core.
"""


class HighlightingError(RuntimeError):
    """Raised when a row's highlight vector does not cover its text."""

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
