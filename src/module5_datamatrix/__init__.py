# file: src/module5_datamatrix/__init__.py

"""
Module 5: Data Matrix

Public entry point of the ECC200 Data Matrix encoder.

Public API:
    - encode(message, rectangular=False, scheme=None) -> Symbol
    - DataMatrixEncoder(config_path=None).encode(message) -> Symbol
    - Symbol: width, height, bit_at(x, y), to_array(), to_int()

Example usage:
    >>> from module5_datamatrix import encode
    >>> symbol = encode(b"TEST")
    >>> symbol
    <Symbol 12x12@ascii>
    >>> symbol.bit_at(0, 0)
    True
"""

from .encoder import encode, DataMatrixEncoder
from .symbol import Symbol
from .config import load_config, setup_logging
from module1_compaction import FNC1, FNC1_CODEWORD, SCHEMES, DEFAULT_SCHEMES
from module1_compaction.exceptions import DataMatrixError, EncodingError, InvalidOptionError

__all__ = [
    "encode",
    "DataMatrixEncoder",
    "Symbol",
    "load_config",
    "setup_logging",
    "FNC1",
    "FNC1_CODEWORD",
    "SCHEMES",
    "DEFAULT_SCHEMES",
    "DataMatrixError",
    "EncodingError",
    "InvalidOptionError",
]

__version__ = "1.0.0"
