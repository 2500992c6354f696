"""
The SaM transformation function.

Each round walks the state with a fixed stride DELTA. The first phase combines
every pair of neighbours on that walk into two scratch buffers; the second
phase folds the scratch buffers back into the state. The walking cursor is
shared by both phases and all rounds of a call.
"""

from trinary import COMBINING_TABLE
from .constants import STATE_SIZE, ROUNDS, DELTA


def next_index(index):
    return (index + DELTA) % STATE_SIZE


def traversal(start=0):
    """Return the STATE_SIZE indices visited by stepping DELTA from `start`."""
    order = []
    index = start
    for _ in range(STATE_SIZE):
        order.append(index)
        index = next_index(index)
    return order


_NEXT = tuple(next_index(index) for index in range(STATE_SIZE))


def transform(state, left_part, right_part):
    """
    Apply ROUNDS rounds to `state` in place.

    `left_part` and `right_part` are scratch lists of STATE_SIZE elements;
    their previous contents are ignored. All three lists must hold trits.
    """
    # f(a, b) == COMBINING_TABLE[a * 3 + b + 4]
    table = COMBINING_TABLE
    following = _NEXT
    index = 0
    for _ in range(ROUNDS):
        for i in range(STATE_SIZE):
            next_ind = following[index]
            a = state[index]
            b = state[next_ind]
            left_part[i] = table[a * 3 + b + 4]
            right_part[i] = table[b * 3 + a + 4]
            index = next_ind

        for i in range(STATE_SIZE):
            next_ind = following[index]
            state[i] = table[left_part[index] * 3 + right_part[next_ind] + 4]
            index = next_ind
