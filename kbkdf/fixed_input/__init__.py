"""
Fixed Input Data Package

This package assembles the standard SP 800-108 fixed input data
(Label || 0x00 || Context || [L]_2) and exposes the counter KDF built on it.
"""

from .assembler import CounterKDF, counter_kdf, build_fixed_input_data, encode_length, KBKDF_DEFAULT_PARAMS

__all__ = ['CounterKDF', 'counter_kdf', 'build_fixed_input_data', 'encode_length', 'KBKDF_DEFAULT_PARAMS']
