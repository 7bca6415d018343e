"""
HMAC Pseudorandom Function

This module provides the PRF used by the counter-mode KBKDF: HMAC keyed by
the input keying material over a hash from the PRF registry.
"""

from Cryptodome.Hash import HMAC

from .registry import HashInfo


def hmac_prf(key: bytes, hash_info: HashInfo, *parts: bytes) -> bytes:
    """
    Compute HMAC(key, parts[0] || parts[1] || ...).
    
    Args:
        key: The HMAC key (input keying material)
        hash_info: Registry entry of the underlying hash
        parts: Message fragments, fed to the MAC in order
        
    Returns:
        The full-length HMAC digest
    """
    mac = HMAC.new(key, digestmod=hash_info.hash_module)
    for part in parts:
        mac.update(part)
    return mac.digest()


if __name__ == "__main__":
    import os
    from .registry import AVAILABLE_HASHES
    
    key = os.urandom(32)
    for name, info in AVAILABLE_HASHES.items():
        tag = hmac_prf(key, info, b"fixed ", b"input")
        assert tag == hmac_prf(key, info, b"fixed input")
        assert len(tag) == info.digest_size
        print(f"{name}: {tag.hex()}")
