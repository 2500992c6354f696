"""
The SaM combining function.

A fixed 3x3 table from an ordered pair of trits to a trit; the only
non-linear part of the permutation.
"""

TRITS = (-1, 0, 1)

# Row a, column b, both shifted from -1..1 to 0..2.
COMBINING_TABLE = (
    0, -1, 1,
    0, 1, -1,
    -1, 1, 0,
)


def combine(a, b):
    """Return f(a, b). Inputs are assumed to be trits."""
    return COMBINING_TABLE[(a + 1) * 3 + (b + 1)]
