# file: src/module3_ecc/__init__.py

"""
Module 3: Error Correction Coding (ECC)

Reed-Solomon error correction over GF(256) (primitive polynomial 0x12D)
with ECC200 block interleaving. Per-block encoding uses reedsolo.

Public API:
    - ecc_encode(data, nsym, blocks) -> codewords
    - ReedSolomonCodec(nsym, blocks)
    - generator_polynomial(nsym) -> coefficients
"""

from .encoder import ecc_encode
from .rs_codec import ReedSolomonCodec
from .galois import GF_EXP, GF_LOG, PRIMITIVE_POLY, gf_mul, generator_polynomial
from .errors import ECCError, ECCEncodingError, ECCConfigurationError

__all__ = [
    "ecc_encode",
    "ReedSolomonCodec",
    "GF_EXP",
    "GF_LOG",
    "PRIMITIVE_POLY",
    "gf_mul",
    "generator_polynomial",
    "ECCError",
    "ECCEncodingError",
    "ECCConfigurationError",
]
