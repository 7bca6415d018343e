"""
Counter Mode Package

This package implements the SP 800-108 counter-mode derivation engine and
the encoding of its iteration counter.
"""

from .encoder import COUNTER_WIDTHS, encode_counter, max_iterations
from .engine import (
    CounterLocation,
    counter_kbkdf,
    counter_kbkdf_before_fixed_counter,
    counter_kbkdf_after_fixed_counter,
    counter_kbkdf_middle_fixed_counter,
    derive,
)

__all__ = [
    'COUNTER_WIDTHS',
    'encode_counter',
    'max_iterations',
    'CounterLocation',
    'counter_kbkdf',
    'counter_kbkdf_before_fixed_counter',
    'counter_kbkdf_after_fixed_counter',
    'counter_kbkdf_middle_fixed_counter',
    'derive',
]
