"""
Counter-Mode KBKDF Engine

This module implements KDF in Counter Mode from NIST SP 800-108 (section 4.1)
with HMAC as the PRF. The three counter locations used by the CAVP test
suites are supported:

- BEFORE_FIXED: K(i) = PRF(KI, [i]_2 || FixedInputData)
- AFTER_FIXED:  K(i) = PRF(KI, FixedInputData || [i]_2)
- MIDDLE_FIXED: K(i) = PRF(KI, DataBeforeCtr || [i]_2 || DataAfterCtr)

All three share a single derivation loop; the message layout is reduced to
a (prefix, suffix) pair before the loop starts.
"""

import logging
from enum import Enum
from typing import Mapping, Optional

from ..errors import IterationCountTooHighError
from ..prf.hmac_prf import hmac_prf
from ..prf.registry import HashInfo, get_hash_info
from .encoder import encode_counter, max_iterations

logger = logging.getLogger(__name__)


class CounterLocation(Enum):
    """Position of the counter relative to the fixed input data."""
    BEFORE_FIXED = 'BEFORE_FIXED'
    AFTER_FIXED = 'AFTER_FIXED'
    MIDDLE_FIXED = 'MIDDLE_FIXED'


def counter_kbkdf(hash_algorithm: str,
                  key_in: bytes,
                  fixed_input_before: bytes,
                  fixed_input_after: bytes,
                  key_out_size: int,
                  counter_width: int,
                  n: int,
                  registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """
    Derive key material with the counter placed between two fixed fields.

    Either fixed field may be empty, which gives the before-fixed and
    after-fixed layouts.

    Args:
        hash_algorithm: Hash for the HMAC PRF (e.g. 'sha256')
        key_in: Input keying material (KI)
        fixed_input_before: Fixed data preceding the counter
        fixed_input_after: Fixed data following the counter
        key_out_size: Number of bytes to return
        counter_width: Counter width in bits (8, 16, 24 or 32)
        n: Number of PRF iterations
        registry: Optional PRF registry overriding the default one

    Returns:
        The first key_out_size bytes of K(1) || K(2) || ... || K(n)

    Raises:
        UnsupportedHashAlgorithmError: If hash_algorithm is not registered
        UnsupportedCounterWidthError: If counter_width is not supported
        IterationCountTooHighError: If n exceeds 2**counter_width - 1
        ValueError: If the sizes are negative or n iterations cannot
            produce key_out_size bytes
    """
    hash_info = get_hash_info(hash_algorithm, registry)
    max_n = max_iterations(counter_width)

    if n > max_n:
        raise IterationCountTooHighError(n, max_n)
    if n < 0:
        raise ValueError(f"Iteration count must not be negative, got {n}")
    if key_out_size < 0:
        raise ValueError(f"Output size must not be negative, got {key_out_size}")
    if key_out_size > n * hash_info.digest_size:
        raise ValueError(
            f"{n} iterations of {hash_info.name} yield {n * hash_info.digest_size} bytes, "
            f"{key_out_size} requested"
        )

    logger.debug("Counter KBKDF: prf=HMAC-%s r=%d n=%d out=%d bytes",
                 hash_info.name, counter_width, n, key_out_size)

    # Blocks past key_out_size would be truncated away, so they are not computed.
    blocks = -(-key_out_size // hash_info.digest_size)

    result = bytearray()
    for i in range(1, blocks + 1):
        result += hmac_prf(key_in, hash_info,
                           fixed_input_before,
                           encode_counter(counter_width, i),
                           fixed_input_after)

    return bytes(result[:key_out_size])


def counter_kbkdf_before_fixed_counter(hash_algorithm: str,
                                       key_in: bytes,
                                       fixed_input_data: bytes,
                                       key_out_size: int,
                                       counter_width: int,
                                       n: int,
                                       registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """Counter-mode KBKDF with the counter before the fixed input data."""
    return counter_kbkdf(hash_algorithm, key_in, b'', fixed_input_data,
                         key_out_size, counter_width, n, registry)


def counter_kbkdf_after_fixed_counter(hash_algorithm: str,
                                      key_in: bytes,
                                      fixed_input_data: bytes,
                                      key_out_size: int,
                                      counter_width: int,
                                      n: int,
                                      registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """Counter-mode KBKDF with the counter after the fixed input data."""
    return counter_kbkdf(hash_algorithm, key_in, fixed_input_data, b'',
                         key_out_size, counter_width, n, registry)


def counter_kbkdf_middle_fixed_counter(hash_algorithm: str,
                                       key_in: bytes,
                                       fixed_input_before: bytes,
                                       fixed_input_after: bytes,
                                       key_out_size: int,
                                       counter_width: int,
                                       n: int,
                                       registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """Counter-mode KBKDF with the counter between two fixed input fields."""
    return counter_kbkdf(hash_algorithm, key_in, fixed_input_before, fixed_input_after,
                         key_out_size, counter_width, n, registry)


def derive(location: CounterLocation,
           hash_algorithm: str,
           key_in: bytes,
           key_out_size: int,
           counter_width: int,
           n: int,
           fixed_input_data: bytes = b'',
           fixed_input_after: bytes = b'',
           registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """
    Dispatch to the variant selected by location.

    For MIDDLE_FIXED, fixed_input_data is the part before the counter and
    fixed_input_after the part following it; fixed_input_after must be
    empty for the other two locations.
    """
    if location is CounterLocation.MIDDLE_FIXED:
        return counter_kbkdf_middle_fixed_counter(hash_algorithm, key_in, fixed_input_data,
                                                  fixed_input_after, key_out_size,
                                                  counter_width, n, registry)
    if fixed_input_after:
        raise ValueError(f"fixed_input_after is only used with {CounterLocation.MIDDLE_FIXED.value}")
    if location is CounterLocation.BEFORE_FIXED:
        return counter_kbkdf_before_fixed_counter(hash_algorithm, key_in, fixed_input_data,
                                                  key_out_size, counter_width, n, registry)
    if location is CounterLocation.AFTER_FIXED:
        return counter_kbkdf_after_fixed_counter(hash_algorithm, key_in, fixed_input_data,
                                                 key_out_size, counter_width, n, registry)
    raise ValueError(f"Unknown counter location: {location!r}")


if __name__ == "__main__":
    import os

    ki = os.urandom(32)
    fixed = os.urandom(60)

    before = counter_kbkdf_before_fixed_counter('sha256', ki, fixed, 40, 8, 2)
    after = counter_kbkdf_after_fixed_counter('sha256', ki, fixed, 40, 8, 2)
    middle = counter_kbkdf_middle_fixed_counter('sha256', ki, b'', fixed, 40, 8, 2)
    print(f"Before fixed: {before.hex()}")
    print(f"After fixed:  {after.hex()}")
    assert before == middle
    assert before != after

    try:
        counter_kbkdf_before_fixed_counter('sha256', ki, fixed, 16, 8, 256)
    except IterationCountTooHighError as e:
        print(f"Rejected: {e}")
