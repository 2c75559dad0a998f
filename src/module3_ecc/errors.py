# file: src/module3_ecc/errors.py

"""
ECC-specific exception hierarchy.

All exceptions inherit from ECCError, itself a DataMatrixError.
"""

from module1_compaction.exceptions import DataMatrixError


class ECCError(DataMatrixError):
    """Base exception for all ECC-related errors."""
    pass


class ECCEncodingError(ECCError):
    """Raised when encoding fails."""
    pass


class ECCConfigurationError(ECCError):
    """Raised when ECC configuration is invalid."""
    pass
