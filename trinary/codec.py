"""
Helpers for checking trit sequences and moving integers in and out of
balanced ternary.
"""

from .table import TRITS


def is_trit(value):
    """True for the ints -1, 0 and 1 (bools are rejected)."""
    return type(value) is int and value in TRITS


def validate_trits(trits, name="trits"):
    """Raise ValueError on the first element that is not a trit."""
    for position, value in enumerate(trits):
        if not is_trit(value):
            raise ValueError(
                f"{name}[{position}] = {value!r} is not a trit"
            )


def int_to_trits(n, length):
    """Encode an integer as `length` balanced-ternary trits, least significant first."""
    if length < 0:
        raise ValueError("Length must be non-negative")
    if abs(n) > (3**length - 1) // 2:
        raise ValueError("Integer too large for length")

    trits = []
    for _ in range(length):
        remainder = n % 3
        if remainder == 2:
            remainder = -1
        trits.append(remainder)
        n = (n - remainder) // 3
    return trits


def trits_to_int(trits):
    """Decode balanced-ternary trits, least significant first."""
    n = 0
    for trit in reversed(trits):
        n = n * 3 + trit
    return n
