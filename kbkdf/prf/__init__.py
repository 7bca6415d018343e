"""
PRF Package

This package holds the pseudorandom function used by the key derivation
engine (HMAC) and the registry of hash algorithms it may be keyed with.
"""

from .registry import HashInfo, AVAILABLE_HASHES, SUPPORTED_HASH_ALGORITHMS, get_hash_info
from .hmac_prf import hmac_prf

__all__ = ['HashInfo', 'AVAILABLE_HASHES', 'SUPPORTED_HASH_ALGORITHMS', 'get_hash_info', 'hmac_prf']
