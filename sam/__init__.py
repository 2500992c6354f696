"""
SaM - a sponge-based hash function over balanced ternary.
"""

from .constants import HASH_SIZE, STATE_SIZE, ROUNDS, DELTA, PARAMETER_SETS
from .transform import transform, traversal
from .sponge import SaM
from .hasher import SaMHasher, sam_hash

__all__ = [
    'HASH_SIZE',
    'STATE_SIZE',
    'ROUNDS',
    'DELTA',
    'PARAMETER_SETS',
    'transform',
    'traversal',
    'SaM',
    'SaMHasher',
    'sam_hash'
]
