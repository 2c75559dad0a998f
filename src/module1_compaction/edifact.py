# file: src/module1_compaction/edifact.py

"""
EDIFACT compaction: four 6-bit values packed into three codewords.
"""

from typing import List

from .ascii import ascii_encode

LATCH = 240
UNLATCH_VALUE = 31
MIN_BYTE = 32
MAX_BYTE = 94


def edifact_encode(data: bytes) -> List[int]:
    """
    Encode bytes with the EDIFACT scheme.

    The last slot of the final group always carries the unlatch value, so the
    byte that would have filled it (and anything after it) is written in
    ASCII instead.

    Returns:
        Codewords, or an empty list if any byte lies outside [32, 94]
    """
    data = bytes(data)
    if any(byte < MIN_BYTE or byte > MAX_BYTE for byte in data):
        return []

    slots = (len(data) + 1) & -4
    result = [LATCH] if slots > 0 else []
    word = 0
    for i in range(slots):
        value = data[i] if i < slots - 1 else UNLATCH_VALUE
        word = word * 64 + (value & 63)
        if i & 3 == 3:
            result.append(word >> 16)
            result.append(word >> 8 & 255)
            result.append(word & 255)
            word = 0

    if slots > len(data):
        return result

    result.extend(ascii_encode(data[max(slots - 1, 0):]))
    return result
