# file: src/module3_ecc/galois.py

"""
GF(256) arithmetic for Data Matrix Reed-Solomon.

Field generated by x^8 + x^5 + x^3 + x^2 + 1 (0x12D) with primitive
element 2. Tables come from reedsolo's table builder and are copied into
frozen numpy arrays once at import.
"""

from functools import lru_cache
from typing import Tuple

import numpy as np
from reedsolo import init_tables, rs_generator_poly

PRIMITIVE_POLY = 0x12D
GENERATOR = 2
FIRST_ROOT = 1
FIELD_SIZE = 256
GROUP_ORDER = 255


def _build_tables() -> Tuple[np.ndarray, np.ndarray]:
    gf_log, gf_exp, _ = init_tables(prim=PRIMITIVE_POLY, generator=GENERATOR, c_exp=8)
    exp = np.array(list(gf_exp[:GROUP_ORDER]), dtype=np.int64)
    log = np.array(list(gf_log[:FIELD_SIZE]), dtype=np.int64)
    exp.flags.writeable = False
    log.flags.writeable = False
    return exp, log


GF_EXP, GF_LOG = _build_tables()


def gf_mul(a: int, b: int) -> int:
    """Multiply two field elements."""
    if a == 0 or b == 0:
        return 0
    return int(GF_EXP[(GF_LOG[a] + GF_LOG[b]) % GROUP_ORDER])


def gf_pow2(power: int) -> int:
    """alpha ** power."""
    return int(GF_EXP[power % GROUP_ORDER])


@lru_cache(maxsize=None)
def generator_polynomial(nsym: int) -> Tuple[int, ...]:
    """
    Generator polynomial prod_{i=1..nsym} (x + alpha^i).

    Returns:
        The nsym non-leading coefficients, highest degree first; the
        leading coefficient is an implicit 1.
    """
    # reedsolo multiplies with module-level tables; select this field first
    init_tables(prim=PRIMITIVE_POLY, generator=GENERATOR, c_exp=8)
    gen = rs_generator_poly(nsym, fcr=FIRST_ROOT, generator=GENERATOR)
    return tuple(int(c) for c in gen[1:])
