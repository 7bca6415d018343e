"""
PRF Registry

Maps a hash algorithm identifier to the hash module used by the HMAC PRF
and to its output length in bits. The default registry is read-only; callers
that need a different set of algorithms pass their own mapping to the
derivation functions instead of mutating this one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from Cryptodome.Hash import SHA256, SHA384, SHA512

from ..errors import UnsupportedHashAlgorithmError


@dataclass(frozen=True)
class HashInfo:
    """Registry entry describing one hash algorithm."""
    name: str
    len_bits: int
    hash_module: Any

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return self.len_bits // 8


AVAILABLE_HASHES: Mapping[str, HashInfo] = MappingProxyType({
    'sha256': HashInfo('sha256', 256, SHA256),
    'sha384': HashInfo('sha384', 384, SHA384),
    'sha512': HashInfo('sha512', 512, SHA512),
})

SUPPORTED_HASH_ALGORITHMS = tuple(AVAILABLE_HASHES)


def get_hash_info(hash_algorithm: str,
                  registry: Optional[Mapping[str, HashInfo]] = None) -> HashInfo:
    """
    Look up a hash algorithm in the PRF registry.
    
    Args:
        hash_algorithm: Identifier such as 'sha256' or 'sha384'
        registry: Mapping to search (defaults to AVAILABLE_HASHES)
        
    Returns:
        The HashInfo entry for the algorithm
        
    Raises:
        UnsupportedHashAlgorithmError: If the identifier is not registered
    """
    if registry is None:
        registry = AVAILABLE_HASHES
    
    try:
        return registry[hash_algorithm]
    except (KeyError, TypeError):
        raise UnsupportedHashAlgorithmError(hash_algorithm) from None
