"""
KBKDF - NIST SP 800-108 Key-Based Key Derivation in Counter Mode

This library derives key material from a keying secret by iterating HMAC
over an incrementing counter and caller-supplied fixed input data.

Key Features:
- Counter before, after, or in the middle of the fixed input data
- 8, 16, 24 and 32-bit counters
- HMAC-SHA-256, HMAC-SHA-384 and HMAC-SHA-512 PRFs
- Standard Label || 0x00 || Context || [L]_2 fixed input assembly
- Injectable PRF registry

"""

from .errors import (
    KBKDFError,
    UnsupportedHashAlgorithmError,
    UnsupportedCounterWidthError,
    IterationCountTooHighError,
)
from .prf import HashInfo, AVAILABLE_HASHES, SUPPORTED_HASH_ALGORITHMS, get_hash_info
from .counter_mode import (
    COUNTER_WIDTHS,
    CounterLocation,
    counter_kbkdf_before_fixed_counter,
    counter_kbkdf_after_fixed_counter,
    counter_kbkdf_middle_fixed_counter,
)
from .fixed_input import CounterKDF, counter_kdf, build_fixed_input_data

__all__ = [
    'KBKDFError',
    'UnsupportedHashAlgorithmError',
    'UnsupportedCounterWidthError',
    'IterationCountTooHighError',
    'HashInfo',
    'AVAILABLE_HASHES',
    'SUPPORTED_HASH_ALGORITHMS',
    'get_hash_info',
    'COUNTER_WIDTHS',
    'CounterLocation',
    'counter_kbkdf_before_fixed_counter',
    'counter_kbkdf_after_fixed_counter',
    'counter_kbkdf_middle_fixed_counter',
    'CounterKDF',
    'counter_kdf',
    'build_fixed_input_data',
]

__version__ = '0.1.0'
__author__ = 'KBKDF Team'
