"""
Balanced-ternary primitives: trits, the combining table and an integer codec.
"""

from .table import COMBINING_TABLE, TRITS, combine
from .codec import is_trit, validate_trits, int_to_trits, trits_to_int

__all__ = [
    'COMBINING_TABLE',
    'TRITS',
    'combine',
    'is_trit',
    'validate_trits',
    'int_to_trits',
    'trits_to_int'
]
