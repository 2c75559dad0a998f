# file: src/module3_ecc/testing_utils.py

"""
Testing utilities for ECC module.

Provides codeword corruption for validation of the syndrome check.
Used only in test contexts.
"""

import random
from typing import List, Optional, Sequence


def inject_codeword_errors(
    codewords: Sequence[int],
    num_errors: int,
    seed: Optional[int] = None
) -> List[int]:
    """
    Replace `num_errors` randomly chosen codewords with different values.

    Args:
        codewords: Original codewords
        num_errors: Number of distinct positions to corrupt
        seed: Random seed for reproducibility (optional)

    Returns:
        Corrupted copy of the codewords
    """
    if not 0 <= num_errors <= len(codewords):
        raise ValueError(f"num_errors must be in [0, {len(codewords)}], got {num_errors}")

    rng = random.Random(seed)
    corrupted = list(codewords)
    for pos in rng.sample(range(len(codewords)), num_errors):
        corrupted[pos] ^= rng.randint(1, 255)
    return corrupted
