# file: src/module3_ecc/rs_codec.py

"""
Reed-Solomon codec for Data Matrix.

Uses the reedsolo library for the per-block RS encoding and implements the
block interleaving used by ECC200: data codewords are dealt round-robin
into `blocks` blocks, each block gets its own `nsym` correction codewords,
and the correction codewords are written back in the same round-robin
order after the data.
"""

from typing import List, Sequence

from reedsolo import RSCodec

from .errors import ECCEncodingError, ECCConfigurationError
from .galois import FIRST_ROOT, GENERATOR, GROUP_ORDER, PRIMITIVE_POLY, gf_mul, gf_pow2


class ReedSolomonCodec:
    """
    Interleaved Reed-Solomon encoder over GF(256).

    Parameters:
        nsym (int): Correction codewords per block
        blocks (int): Number of interleaved blocks

    Invariants:
        - Each block (data + nsym) fits the 255-symbol code length
        - Output length = len(data) + nsym * blocks
    """

    def __init__(self, nsym: int, blocks: int = 1):
        if nsym < 1:
            raise ECCConfigurationError(f"nsym={nsym} must be >= 1")
        if blocks < 1:
            raise ECCConfigurationError(f"blocks={blocks} must be >= 1")
        if nsym >= GROUP_ORDER:
            raise ECCConfigurationError(f"nsym={nsym} exceeds GF(256) code length")

        self.nsym = nsym
        self.blocks = blocks

        # Data Matrix field: 0x12D, roots alpha^1 .. alpha^nsym
        self.codec = RSCodec(
            nsym,
            nsize=GROUP_ORDER,
            fcr=FIRST_ROOT,
            prim=PRIMITIVE_POLY,
            generator=GENERATOR,
            c_exp=8,
        )

    def block_ecc(self, block: Sequence[int]) -> List[int]:
        """
        Compute correction codewords for one block.

        Raises:
            ECCEncodingError: If reedsolo rejects the block
        """
        if len(block) + self.nsym > GROUP_ORDER:
            raise ECCEncodingError(
                f"Block of {len(block)} codewords plus {self.nsym} correction "
                f"codewords exceeds GF(256) code length {GROUP_ORDER}"
            )
        try:
            encoded = self.codec.encode(bytearray(block))
        except Exception as e:
            raise ECCEncodingError(f"Reed-Solomon encoding failed: {e}") from e
        return list(encoded[-self.nsym:])

    def split_blocks(self, data: Sequence[int]) -> List[List[int]]:
        """Deal codewords round-robin into blocks."""
        return [list(data[block::self.blocks]) for block in range(self.blocks)]

    def encode(self, data: Sequence[int]) -> List[int]:
        """
        Append interleaved correction codewords to `data`.

        Args:
            data: Padded data codewords

        Returns:
            New list: data followed by nsym * blocks correction codewords

        Raises:
            ECCEncodingError: If a block would exceed the code length
        """
        if len(data) == 0:
            raise ECCEncodingError("Cannot encode empty data")

        blocks = self.split_blocks(data)
        encoded = list(data) + [0] * (self.nsym * self.blocks)
        offset = len(data)
        for index, block in enumerate(blocks):
            for i, codeword in enumerate(self.block_ecc(block)):
                encoded[offset + index + i * self.blocks] = codeword
        return encoded

    def syndromes(self, block: Sequence[int]) -> List[int]:
        """Evaluate a received block (data + correction) at alpha^1..alpha^nsym."""
        result = []
        for root in range(FIRST_ROOT, FIRST_ROOT + self.nsym):
            point = gf_pow2(root)
            value = 0
            for codeword in block:
                value = gf_mul(value, point) ^ codeword
            result.append(value)
        return result

    def check(self, block: Sequence[int]) -> bool:
        """True if `block` (data followed by its correction codewords) is a valid codeword."""
        return not any(self.syndromes(block))
