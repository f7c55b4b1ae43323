"""
Poseidon hash over the BN254 scalar field.

Instantiated with the same parameters as the circomlib implementation of
Poseidon, so digests match circomlib, circomlibjs and poseidon-lite.

The permutation runs R_F / 2 full rounds, R_P partial rounds, then R_F / 2
full rounds. Every round adds t round constants, applies the x^5 S-box (to
all elements in a full round, to element 0 in a partial round) and multiplies
by the MDS matrix.
"""

from typing import Iterable, List, Sequence

from .config import PoseidonConfig, get_config
from .constants import check_arity
from .errors import InvalidArity
from .field import FF, FieldLike, add, field_to_hex, mul, pow5, to_field


def _mix(state: List[int], mds: Sequence[Sequence[int]]) -> List[int]:
    """
    Multiply the state by the MDS matrix: out[i] = sum_j M[i][j] * state[j].

    Rust Reference: poseidon_bn128::mix
    """
    out = []
    for row in mds:
        acc = 0
        for m_ij, s_j in zip(row, state):
            acc = add(acc, mul(m_ij, s_j))
        out.append(acc)
    return out


def permute(state: Sequence[int], config: PoseidonConfig) -> List[int]:
    """
    Apply the Poseidon permutation.

    Args:
        state: t canonical field elements (as integers)
        config: Parameters for the arity t - 1

    Returns:
        The permuted state as a new list of t field elements

    Rust Reference: poseidon_bn128::poseidon (round loop)
    """
    t = config.t
    half_full_rounds = config.n_full_rounds // 2
    C = config.round_constants

    state = list(state)
    for r in range(config.n_rounds):
        full = r < half_full_rounds or r >= half_full_rounds + config.n_partial_rounds
        for i in range(t):
            state[i] = add(state[i], C[r * t + i])
            if full or i == 0:
                state[i] = pow5(state[i])
        state = _mix(state, config.mds)

    return state


def poseidon(arity: int, inputs: Iterable[FieldLike]) -> FF:
    """
    Calculate the Poseidon hash of `arity` field elements.

    The arity is passed separately from the inputs so that a wrongly sized
    input sequence is caught rather than hashed with another arity's
    parameters.

    Args:
        arity: Number of inputs, 1 through 16
        inputs: Canonical field elements (ints in [0, p) or FF scalars); any
            iterable, it is read once

    Returns:
        The digest as an FF element

    Raises:
        InvalidArity: If arity is unsupported or len(inputs) != arity
        InvalidFieldElement: If any input is outside [0, p)
        ConfigurationMissing: If parameters for the arity cannot be loaded

    Rust Reference: poseidon_bn128::poseidon
    """
    check_arity(arity)
    try:
        inputs = list(inputs)
    except TypeError:
        raise InvalidArity(f"expected {arity} inputs, received a {type(inputs).__name__}") from None
    if len(inputs) != arity:
        raise InvalidArity(f"expected {arity} inputs, received {len(inputs)}")
    elements = [int(to_field(x)) for x in inputs]
    config = get_config(arity)

    # Capacity element first, then the inputs
    state = permute([0] + elements, config)
    return FF(state[0])


def poseidon_hex(arity: int, inputs: Iterable[FieldLike]) -> str:
    """Same as poseidon() but returns the digest as 0x-prefixed hex."""
    return field_to_hex(poseidon(arity, inputs))
