"""
Counter Encoder

Encodes the KBKDF iteration counter as a fixed-width big-endian field
([i]_2 with r bits in SP 800-108 notation).
"""

from ..errors import UnsupportedCounterWidthError

# Supported counter widths (rLen) in bits
COUNTER_WIDTHS = (8, 16, 24, 32)


def _check_width(counter_width: int) -> None:
    if not isinstance(counter_width, int) or counter_width not in COUNTER_WIDTHS:
        raise UnsupportedCounterWidthError(counter_width)


def max_iterations(counter_width: int) -> int:
    """
    Largest iteration count representable by a counter of the given width.
    
    Args:
        counter_width: Counter width in bits
        
    Returns:
        2**counter_width - 1
    """
    _check_width(counter_width)
    return (1 << counter_width) - 1


def encode_counter(counter_width: int, i: int) -> bytes:
    """
    Encode a counter value as counter_width // 8 big-endian bytes.
    
    Values wider than the field are truncated to their low-order bits;
    the engine rejects iteration counts that would need this.
    
    Args:
        counter_width: Counter width in bits (8, 16, 24 or 32)
        i: Counter value
        
    Returns:
        The encoded counter
        
    Raises:
        UnsupportedCounterWidthError: If counter_width is not supported
    """
    _check_width(counter_width)
    return (i & ((1 << counter_width) - 1)).to_bytes(counter_width // 8, byteorder='big')
