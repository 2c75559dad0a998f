# file: src/module1_compaction/ascii.py

"""
ASCII and GS1 compaction.

ASCII is the default Data Matrix scheme: digit pairs are packed into a single
codeword, bytes above 127 use the Upper Shift escape, everything else is
stored as byte + 1. GS1 is identical except that the group separator byte is
written as the FNC1 codeword.
"""

from typing import List

# See https://www.gs1.org/standards/gs1-datamatrix-guideline/25
FNC1 = 29
FNC1_CODEWORD = 232

UPPER_SHIFT = 235
DIGIT_PAIR_BASE = 130


def _is_digit(byte: int) -> bool:
    return 48 <= byte <= 57


def _encode(data: bytes, fnc1: bool) -> List[int]:
    result = []
    i = 0
    length = len(data)

    while i < length:
        byte = data[i]
        if i + 1 < length and _is_digit(byte) and _is_digit(data[i + 1]):
            result.append((byte - 48) * 10 + (data[i + 1] - 48) + DIGIT_PAIR_BASE)
            i += 2
            continue
        if byte > 127:
            result.append(UPPER_SHIFT)
            result.append((byte - 127) & 255)
        elif fnc1 and byte == FNC1:
            result.append(FNC1_CODEWORD)
        else:
            result.append(byte + 1)
        i += 1

    return result


def ascii_encode(data: bytes) -> List[int]:
    """
    Encode bytes with the ASCII scheme.

    Args:
        data: Message bytes

    Returns:
        Codeword list (empty for an empty message)

    Example:
        >>> ascii_encode(b"A12")
        [66, 142]
    """
    return _encode(bytes(data), fnc1=False)


def gs1_encode(data: bytes) -> List[int]:
    """
    Encode bytes with the GS1 flavour of ASCII.

    The group separator (0x1D) becomes FNC1 (232) instead of 30.
    """
    return _encode(bytes(data), fnc1=True)
