"""
Pure Python implementation of the SaM sponge construction.

Input trits are absorbed into the first HASH_SIZE trits of a STATE_SIZE-trit
state, output is squeezed from the same prefix, and the transformation
function runs after every block.

To use SaM as a general-purpose hash, put one or more non-zero trits into the
capacity region (index HASH_SIZE and up) before absorbing, preferably the
length of the absorbed data. See `SaMHasher`.
"""

from trinary import validate_trits
from .constants import HASH_SIZE, STATE_SIZE
from .transform import transform


def _check_span(name, size, offset, length):
    if offset < 0:
        raise ValueError(f"Negative {name} offset")
    if length < 0:
        raise ValueError(f"Negative {name} length")
    if offset + length > size:
        raise IndexError(
            f"{name} span [{offset}, {offset + length}) exceeds length {size}"
        )


class SaM:
    """A 243-trit sponge over a 729-trit state."""

    def __init__(self, initial_state=None):
        """Initialize with an all-zero state or a copy of `initial_state`."""
        if initial_state is not None:
            if len(initial_state) != STATE_SIZE:
                raise ValueError("Invalid state length")
            validate_trits(initial_state, "initial_state")
            self._state = list(initial_state)
        else:
            self._state = [0] * STATE_SIZE
        self._left_part = [0] * STATE_SIZE
        self._right_part = [0] * STATE_SIZE

    @property
    def state(self):
        """Snapshot of the current state."""
        return tuple(self._state)

    def reset(self):
        """Zero the state in place."""
        state = self._state
        for i in range(STATE_SIZE):
            state[i] = 0

    def transform(self):
        transform(self._state, self._left_part, self._right_part)

    def set_capacity(self, trits, offset=0):
        """Write `trits` into the state starting at index HASH_SIZE + offset."""
        _check_span("capacity", STATE_SIZE - HASH_SIZE, offset, len(trits))
        validate_trits(trits, "capacity")
        start = HASH_SIZE + offset
        self._state[start:start + len(trits)] = trits

    def absorb(self, input, offset=0, length=None):
        """
        Absorb `length` trits of `input` starting at `offset`.

        Blocks of up to HASH_SIZE trits overwrite the head of the state and
        are followed by one transformation each. A short final block leaves
        the rest of the state as it was. Absorbing nothing still runs the
        transformation once.
        """
        if length is None:
            length = max(len(input) - offset, 0)
        _check_span("input", len(input), offset, length)
        validate_trits(input[offset:offset + length], "input")

        state = self._state
        remainder = length
        while True:
            start = offset + length - remainder
            count = min(remainder, HASH_SIZE)
            state[:count] = input[start:start + count]
            remainder -= HASH_SIZE
            self.transform()
            if remainder <= 0:
                break

    def squeeze(self, output=None, offset=0):
        """
        Copy HASH_SIZE trits of state into `output` at `offset`, then transform.

        Allocates the output list when none is given. Returns the list written.
        """
        if output is None:
            output = [0] * HASH_SIZE
        _check_span("output", len(output), offset, HASH_SIZE)

        output[offset:offset + HASH_SIZE] = self._state[:HASH_SIZE]
        self.transform()
        return output

    def clone(self):
        """Clone the current sponge state."""
        return SaM(self._state)
