"""
Length-prefixed hashing on top of the raw SaM sponge.

The data length is written into the capacity region before absorbing, so
inputs that differ only in trailing zero trits hash differently. The empty
input keeps the all-zero digest.
"""

from trinary import int_to_trits
from .constants import HASH_SIZE
from .sponge import SaM


class SaMHasher:
    """
    Hash trit sequences with a SaM sponge seeded by the input length.
    """

    def __init__(self, sponge=None):
        self.sponge = sponge if sponge is not None else SaM()

    def hash(self, trits, blocks=1):
        """Return `blocks` * HASH_SIZE trits of digest for `trits`."""
        if blocks < 1:
            raise ValueError("At least one output block is required")

        sponge = self.sponge
        sponge.reset()
        sponge.set_capacity(int_to_trits(len(trits), HASH_SIZE))
        sponge.absorb(trits)

        digest = [0] * (blocks * HASH_SIZE)
        for block in range(blocks):
            sponge.squeeze(digest, block * HASH_SIZE)
        return digest


def sam_hash(trits, blocks=1):
    """Hash `trits` with a fresh SaMHasher."""
    return SaMHasher().hash(trits, blocks)
