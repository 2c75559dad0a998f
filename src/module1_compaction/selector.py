# file: src/module1_compaction/selector.py

"""
Compaction scheme selection.

Runs one forced scheme, or every scheme of the automatic set, and keeps the
shortest successful codeword sequence.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .ascii import ascii_encode, gs1_encode
from .base256 import base256_encode
from .edifact import edifact_encode
from .exceptions import EncodingError, InvalidOptionError
from .ternary import c40_encode, txt_encode, x12_encode

logger = logging.getLogger(__name__)

# Declaration order breaks ties during automatic selection
ENCODERS: Dict[str, Callable[[bytes], List[int]]] = {
    'ascii': ascii_encode,
    'c40': c40_encode,
    'txt': txt_encode,
    'x12': x12_encode,
    'edifact': edifact_encode,
    'base': base256_encode,
    'gs1': gs1_encode,
}

SCHEMES = tuple(ENCODERS)
DEFAULT_SCHEMES = ('ascii', 'c40', 'txt', 'x12', 'edifact', 'base')


def validate_scheme(scheme: Optional[str]) -> None:
    """
    Check that `scheme` is None or a recognised scheme name.

    Raises:
        InvalidOptionError: If the name is not recognised
    """
    if scheme is not None and scheme not in ENCODERS:
        raise InvalidOptionError(
            f"Unknown encoding scheme {scheme!r}, expected one of {', '.join(SCHEMES)}",
            option='scheme',
            value=scheme,
        )


def compact(data: bytes, scheme: str) -> List[int]:
    """Run a single compaction scheme. An empty list means it cannot encode `data`."""
    validate_scheme(scheme)
    return ENCODERS[scheme](data)


def compact_all(data: bytes, schemes: Optional[Iterable[str]] = None) -> Dict[str, List[int]]:
    """
    Run several schemes over the same message.

    Args:
        data: Message bytes
        schemes: Scheme names to run (default: DEFAULT_SCHEMES)

    Returns:
        Ordered mapping scheme -> codewords, including empty failures
    """
    names = DEFAULT_SCHEMES if schemes is None else tuple(schemes)
    for name in names:
        validate_scheme(name)
    return {name: ENCODERS[name](data) for name in names}


def select_scheme(data: bytes, scheme: Optional[str] = None) -> Tuple[str, List[int]]:
    """
    Pick the compaction for a message.

    Args:
        data: Message bytes
        scheme: Forced scheme name, or None for automatic selection

    Returns:
        (scheme name, codewords) with the fewest codewords

    Raises:
        InvalidOptionError: If `scheme` is not recognised
        EncodingError: If no candidate scheme can encode the message
    """
    validate_scheme(scheme)
    candidates = compact_all(data, DEFAULT_SCHEMES if scheme is None else (scheme,))

    best_name, best = None, None
    for name, codewords in candidates.items():
        logger.debug("Scheme %s produced %d codewords", name, len(codewords))
        if not codewords:
            continue
        if best is None or len(codewords) < len(best):
            best_name, best = name, codewords

    if best is None:
        if scheme is not None:
            raise EncodingError(f"Message cannot be encoded with scheme {scheme!r}")
        raise EncodingError("Message cannot be encoded with any compaction scheme")

    logger.debug("Selected scheme %s (%d codewords)", best_name, len(best))
    return best_name, best
