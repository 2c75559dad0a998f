# file: src/module1_compaction/base256.py

"""
Base 256 compaction.

Every codeword after the latch is passed through the 255-state randomising
algorithm, keyed on its 1-based position in the codeword stream:

    R = (V + (149 * P) mod 255 + 1) mod 256
"""

from typing import List

LATCH = 231
SHORT_LENGTH_LIMIT = 250


def randomize_255(value: int, position: int) -> int:
    """Apply the 255-state randomiser to `value` at 1-based `position`."""
    return (value + (149 * position) % 255 + 1) & 255


def base256_encode(data: bytes) -> List[int]:
    """
    Encode bytes with the Base 256 scheme.

    Layout: latch, length field (one codeword, or two for payloads longer
    than 250 bytes), payload bytes.
    """
    data = bytes(data)
    length = len(data)
    result = [LATCH]

    if length > SHORT_LENGTH_LIMIT:
        # Pre-randomised form of 249 + length // 250 at position 2
        result.append((37 + length // SHORT_LENGTH_LIMIT) & 255)
    result.append(randomize_255(length % SHORT_LENGTH_LIMIT, len(result) + 1))

    for byte in data:
        result.append(randomize_255(byte, len(result) + 1))

    return result
