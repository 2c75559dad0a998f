# file: src/module1_compaction/__init__.py

"""
Module 1: Compaction

Turns message bytes into Data Matrix data codewords using one of the
standard compaction schemes (ASCII, C40, TEXT, X12, EDIFACT, Base 256, GS1).

Public API:
    - select_scheme(data, scheme=None) -> (scheme, codewords)
    - compact(data, scheme) -> codewords
    - compact_all(data, schemes=None) -> {scheme: codewords}
"""

from .ascii import ascii_encode, gs1_encode, FNC1, FNC1_CODEWORD
from .ternary import (
    ternary_encode,
    c40_encode,
    txt_encode,
    x12_encode,
    TernaryTable,
    C40_TABLE,
    TEXT_TABLE,
    X12_TABLE,
)
from .edifact import edifact_encode
from .base256 import base256_encode
from .selector import (
    select_scheme,
    compact,
    compact_all,
    validate_scheme,
    SCHEMES,
    DEFAULT_SCHEMES,
)
from .exceptions import DataMatrixError, EncodingError, InvalidOptionError

__all__ = [
    "select_scheme",
    "compact",
    "compact_all",
    "validate_scheme",
    "SCHEMES",
    "DEFAULT_SCHEMES",
    "ascii_encode",
    "gs1_encode",
    "ternary_encode",
    "c40_encode",
    "txt_encode",
    "x12_encode",
    "edifact_encode",
    "base256_encode",
    "TernaryTable",
    "C40_TABLE",
    "TEXT_TABLE",
    "X12_TABLE",
    "FNC1",
    "FNC1_CODEWORD",
    "DataMatrixError",
    "EncodingError",
    "InvalidOptionError",
]
