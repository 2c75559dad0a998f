# file: src/module5_datamatrix/encoder.py

"""
Data Matrix encoding pipeline.

Pipeline:
    Message bytes
    → Compaction (scheme selection)
    → Size class selection
    → Padding to data capacity
    → Reed-Solomon correction codewords (interleaved)
    → Finder patterns + codeword placement
    → Symbol
"""

import logging
from typing import Optional, Union

from module1_compaction import select_scheme, validate_scheme
from module1_compaction.exceptions import EncodingError, InvalidOptionError
from module2_symbol_size import pad_codewords, select_size_class
from module3_ecc import ecc_encode
from module4_placement import build_matrix

from .config import load_config, setup_logging
from .symbol import Symbol

logger = logging.getLogger(__name__)

Message = Union[bytes, bytearray, memoryview, str]

# Marks an encode() option left to the configuration
_CONFIGURED = object()


def _to_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode('utf-8')
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise EncodingError(f"Message must be bytes or str, got {type(message).__name__}")


def encode(
    message: Message,
    rectangular: bool = False,
    scheme: Optional[str] = None
) -> Symbol:
    """
    Encode a message as a Data Matrix symbol.

    Args:
        message: Bytes to encode (str is encoded as UTF-8)
        rectangular: Prefer rectangular sizes when the message is short enough
        scheme: Force a compaction scheme ('ascii', 'c40', 'txt', 'x12',
            'edifact', 'base', 'gs1'); None selects the shortest automatically

    Returns:
        Complete, immutable Symbol

    Raises:
        InvalidOptionError: If `scheme` is not recognised
        EncodingError: If the message cannot be encoded or is too long

    Example:
        >>> symbol = encode(b"TEST")
        >>> symbol.width, symbol.height
        (12, 12)
    """
    validate_scheme(scheme)
    data = _to_bytes(message)

    chosen, codewords = select_scheme(data, scheme)
    size_class = select_size_class(len(codewords), rectangular)

    padded = pad_codewords(codewords, size_class.data_capacity)
    full = ecc_encode(padded, size_class.ecc_per_block, size_class.blocks)
    grid = build_matrix(full, size_class)

    symbol = Symbol(
        scheme=chosen,
        size_class=size_class,
        data_codewords=tuple(codewords),
        codewords=tuple(full),
        grid=grid,
    )
    logger.debug("Encoded %d bytes as %r", len(data), symbol)
    return symbol


class DataMatrixEncoder:
    """
    Configurable Data Matrix encoder.

    Reads default options from a YAML configuration; keyword arguments to
    encode() override them per call. Holds no state between calls.
    """

    def __init__(self, config_path: Optional[str] = None, config: Optional[dict] = None):
        """
        Initialize the encoder.

        Args:
            config_path: Path to configuration YAML file.
                        If None, uses default configuration.
            config: Already loaded configuration dictionary (takes precedence)

        Raises:
            InvalidOptionError: If the configured scheme is not recognised
        """
        self.config = config if config is not None else load_config(config_path)

        encoding = self.config.get('encoding', {})
        self.scheme = encoding.get('scheme')
        self.rectangular = bool(encoding.get('rectangular', False))
        validate_scheme(self.scheme)

        if self.config.get('system', {}).get('verbose', False):
            setup_logging(verbose=True)

    def encode(
        self,
        message: Message,
        *,
        rectangular=_CONFIGURED,
        scheme=_CONFIGURED
    ) -> Symbol:
        """
        Encode a message using configured defaults.

        Args:
            message: Bytes or str to encode
            rectangular: Override encoding.rectangular; omit to use the
                configured value
            scheme: Override encoding.scheme; None selects the shortest
                scheme automatically, omit to use the configured value

        Returns:
            Symbol
        """
        if rectangular is _CONFIGURED:
            rectangular = self.rectangular
        if scheme is _CONFIGURED:
            scheme = self.scheme
        return encode(message, rectangular=rectangular, scheme=scheme)


__all__ = ['encode', 'DataMatrixEncoder', 'EncodingError', 'InvalidOptionError']
