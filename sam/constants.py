"""
SaM parameters.
"""

from collections import namedtuple


HASH_SIZE = 243
STATE_SIZE = 3 * HASH_SIZE
ROUNDS = 9
DELTA = 364

ParameterSet = namedtuple(
    "ParameterSet", ["hash_size", "state_size", "rounds", "delta"]
)

# Named parameter sets. The transform is only defined for the canonical one.
PARAMETER_SETS = {
    "SaM-729": ParameterSet(HASH_SIZE, STATE_SIZE, ROUNDS, DELTA),
}
