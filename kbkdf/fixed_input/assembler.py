"""
SP 800-108 Fixed Input Data and Counter KDF

This module assembles the standard fixed input data used with the
counter-mode KBKDF,

    Label || 0x00 || Context || ContextRand || [L]_2

and derives keys with HMAC as PRF and the counter placed before the fixed
input data. See section 5.1 of NIST SP 800-108r1-upd1.
"""

import hmac
import logging
import math
from typing import Mapping, Optional

from ..counter_mode.engine import counter_kbkdf_before_fixed_counter
from ..prf.registry import HashInfo, get_hash_info

logger = logging.getLogger(__name__)

# Default parameters for the counter KDF
KBKDF_DEFAULT_PARAMS = {
    'hash_algorithm': 'sha256',  # HMAC-SHA-256
    'counter_width': 8,          # rLen in bits
    'length_field_bits': 16,     # Width of [L]_2
}

_LENGTH_FIELD_BYTES = KBKDF_DEFAULT_PARAMS['length_field_bits'] // 8


def encode_length(length_bits: int) -> bytes:
    """
    Encode the output length L as a two-byte big-endian field.

    Lengths above 65535 bits wrap; the field width is fixed by the
    protocols using this KDF.
    """
    return (length_bits & 0xFFFF).to_bytes(_LENGTH_FIELD_BYTES, byteorder='big')


def build_fixed_input_data(label: bytes,
                           context: bytes,
                           length_bits: int,
                           context_rand: bytes = b'') -> bytes:
    """
    Build Label || 0x00 || Context || ContextRand || [L]_2.

    Args:
        label: KDF label, e.g. b"FDO-KDF"
        context: KDF context, e.g. b"AutomaticOnboardTunnel"
        length_bits: Length of the derived key in bits (L)
        context_rand: Additional random context bytes

    Returns:
        The fixed input data
    """
    return b''.join([
        label,
        b'\x00',
        context,
        context_rand,
        encode_length(length_bits),
    ])


def counter_kdf(size_bytes: int,
                hash_algorithm: str,
                key: bytes,
                label: bytes,
                context: bytes,
                context_rand: bytes = b'',
                counter_width: int = KBKDF_DEFAULT_PARAMS['counter_width'],
                registry: Optional[Mapping[str, HashInfo]] = None) -> bytes:
    """
    NIST SP 800-108 KDF in counter mode with HMAC as PRF.

    The counter is placed before the fixed input data.

    Args:
        size_bytes: Required size of the output in bytes
        hash_algorithm: Hash algorithm for the HMAC PRF ('sha256', 'sha384', ...)
        key: HMAC key (input keying material)
        label: KDF label, e.g. FDO uses b"FDO-KDF"
        context: KDF context, e.g. FDO uses b"AutomaticOnboardTunnel" in TO2
        context_rand: Additional random context bytes (default: empty)
        counter_width: Width of the counter field in bits (rLen)
        registry: Optional PRF registry overriding the default one

    Returns:
        size_bytes bytes of derived key material

    Raises:
        UnsupportedHashAlgorithmError: If hash_algorithm is not registered
        UnsupportedCounterWidthError: If counter_width is not supported
        IterationCountTooHighError: If size_bytes needs too many iterations
    """
    hash_info = get_hash_info(hash_algorithm, registry)

    h = hash_info.len_bits
    l = size_bytes * 8
    n = math.ceil(l / h)

    if l > 0xFFFF:
        logger.debug("Output length %d bits does not fit the 16-bit length field", l)

    fixed_input_data = build_fixed_input_data(label, context, l, context_rand)

    return counter_kbkdf_before_fixed_counter(
        hash_algorithm,
        key,
        fixed_input_data,
        size_bytes,
        counter_width,
        n,
        registry,
    )


class CounterKDF:
    """
    Reusable counter-mode KDF bound to a label, context and output size.
    """

    def __init__(self,
                 size_bytes: int,
                 label: bytes,
                 context: bytes,
                 hash_algorithm: str = KBKDF_DEFAULT_PARAMS['hash_algorithm'],
                 context_rand: bytes = b'',
                 counter_width: int = KBKDF_DEFAULT_PARAMS['counter_width'],
                 registry: Optional[Mapping[str, HashInfo]] = None):
        """
        Initialize the KDF parameters.

        The hash algorithm is validated here so that misconfiguration
        surfaces before any key is processed.

        Args:
            size_bytes: Required size of the derived key in bytes
            label: KDF label
            context: KDF context
            hash_algorithm: Hash algorithm for the HMAC PRF
            context_rand: Additional random context bytes
            counter_width: Width of the counter field in bits
            registry: Optional PRF registry overriding the default one
        """
        get_hash_info(hash_algorithm, registry)

        self.size_bytes = size_bytes
        self.label = memoryview(label).tobytes()
        self.context = memoryview(context).tobytes()
        self.hash_algorithm = hash_algorithm
        self.context_rand = memoryview(context_rand).tobytes()
        self.counter_width = counter_width
        self.registry = registry

    def derive(self, key: bytes) -> bytes:
        """
        Derive key material from the input key.

        Args:
            key: Input keying material

        Returns:
            The derived key
        """
        return counter_kdf(self.size_bytes, self.hash_algorithm, key,
                           self.label, self.context, self.context_rand,
                           self.counter_width, self.registry)

    def verify(self, key: bytes, expected_key: bytes) -> bool:
        """
        Check that key derives expected_key.

        Args:
            key: Input keying material
            expected_key: Previously derived key to compare against

        Returns:
            True if the derived key matches, False otherwise
        """
        # Constant-time comparison
        return hmac.compare_digest(self.derive(key), expected_key)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(size_bytes={self.size_bytes}, "
                f"hash_algorithm={self.hash_algorithm!r}, counter_width={self.counter_width})")


if __name__ == "__main__":
    import os

    # FDO TO2 style derivation
    shared_secret = os.urandom(32)
    kdf = CounterKDF(32, b"FDO-KDF", b"AutomaticOnboardTunnel", hash_algorithm='sha384')
    sek = kdf.derive(shared_secret)
    print(f"{kdf!r}: {sek.hex()}")
    assert kdf.verify(shared_secret, sek)
    assert not kdf.verify(os.urandom(32), sek)

    assert sek == counter_kdf(32, 'sha384', shared_secret, b"FDO-KDF", b"AutomaticOnboardTunnel")
    print("Counter KDF self-test completed successfully!")
