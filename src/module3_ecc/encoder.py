# file: src/module3_ecc/encoder.py

"""
ECC encoding entry point.
"""

import logging
from typing import List, Sequence

from .rs_codec import ReedSolomonCodec
from .errors import ECCEncodingError

logger = logging.getLogger(__name__)


def ecc_encode(data: Sequence[int], nsym: int, blocks: int = 1) -> List[int]:
    """
    Protect padded data codewords with Reed-Solomon correction codewords.

    Args:
        data: Padded data codewords (values 0-255)
        nsym: Correction codewords per block
        blocks: Number of interleaved blocks

    Returns:
        Data codewords followed by the interleaved correction codewords

    Raises:
        ECCEncodingError: If a codeword is out of range or encoding fails
        ECCConfigurationError: If nsym or blocks is invalid

    Example:
        >>> full = ecc_encode([85, 70, 84, 85, 129], nsym=7)
        >>> len(full)
        12
    """
    if any(not 0 <= codeword <= 255 for codeword in data):
        raise ECCEncodingError("Codewords must be in range 0-255")

    codec = ReedSolomonCodec(nsym=nsym, blocks=blocks)
    logger.debug(
        "Reed-Solomon: %d data codewords, %d blocks x %d correction codewords",
        len(data), blocks, nsym,
    )
    return codec.encode(data)
