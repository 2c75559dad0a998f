# file: src/module1_compaction/exceptions.py

"""
Data Matrix exception hierarchy.

All exceptions raised by the encoding pipeline inherit from DataMatrixError
for unified handling.
"""


class DataMatrixError(Exception):
    """Base exception for all Data Matrix encoding errors."""
    pass


class EncodingError(DataMatrixError):
    """Raised when a message cannot be represented in any symbol."""
    pass


class InvalidOptionError(DataMatrixError, ValueError):
    """Raised when an encoding option is not recognised."""

    def __init__(self, message: str, option: str = None, value=None):
        super().__init__(message)
        self.option = option
        self.value = value
