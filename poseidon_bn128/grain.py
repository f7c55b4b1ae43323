"""
Poseidon parameter generation with the Grain LFSR.

Reproduces the round constants and MDS matrices of params/*.json the way the
Poseidon reference scripts (generate_parameters_grain.sage) derive them for a
prime field with an x^alpha S-box. Only needed to regenerate or audit the
shipped tables; hashing never calls into this module.

The LFSR is seeded with the instance description, so every (t, R_F, R_P)
gets its own independent stream:

    field (2 bits) | sbox (4) | n (12) | t (12) | R_F (10) | R_P (10) | 1 * 30
"""

from collections import deque
from typing import Dict, List

import numpy as np

from .constants import ROUNDS_F, ROUNDS_P, check_arity
from .field import BN254_PRIME, FF, FIELD_BITS

# Instance description flags
FIELD_PRIME = 1  # 0 would be GF(2^n)
SBOX_POW = 0  # x^alpha; 1 would be x^-1

STATE_BITS = 80
WARMUP_CLOCKS = 160


class GrainLFSR:
    """
    80-bit Grain LFSR in self-shrinking mode.

    Feedback taps are bits 62, 51, 38, 23, 13 and 0. Output bits come in
    pairs: when the first bit is 1 the second is emitted, otherwise the
    second is discarded.
    """

    def __init__(self, t: int, rounds_f: int, rounds_p: int, n: int = FIELD_BITS):
        bits: List[int] = []
        for value, width in (
            (FIELD_PRIME, 2),
            (SBOX_POW, 4),
            (n, 12),
            (t, 12),
            (rounds_f, 10),
            (rounds_p, 10),
        ):
            bits.extend(int(b) for b in format(value, f"0{width}b"))
        bits.extend([1] * (STATE_BITS - len(bits)))

        self.n = n
        self._state = deque(bits, maxlen=STATE_BITS)
        for _ in range(WARMUP_CLOCKS):
            self._clock()

    def _clock(self) -> int:
        s = self._state
        new_bit = s[62] ^ s[51] ^ s[38] ^ s[23] ^ s[13] ^ s[0]
        s.append(new_bit)
        return new_bit

    def next_bit(self) -> int:
        while self._clock() == 0:
            self._clock()
        return self._clock()

    def random_bits(self, num_bits: int) -> int:
        """Read num_bits output bits as an integer, most significant first."""
        value = 0
        for _ in range(num_bits):
            value = (value << 1) | self.next_bit()
        return value

    def field_element(self) -> int:
        """Sample a field element by rejection: n-bit values >= p are skipped."""
        value = self.random_bits(self.n)
        while value >= BN254_PRIME:
            value = self.random_bits(self.n)
        return value


def generate_round_constants(lfsr: GrainLFSR, count: int) -> List[int]:
    return [lfsr.field_element() for _ in range(count)]


def generate_mds_matrix(lfsr: GrainLFSR, t: int) -> List[List[int]]:
    """
    Build the t x t Cauchy matrix M[i][j] = 1 / (x_i + y_j).

    The 2t samples are reduced mod p rather than rejection sampled, and are
    drawn again until they are pairwise distinct.
    """
    samples = [lfsr.random_bits(lfsr.n) % BN254_PRIME for _ in range(2 * t)]
    while len(set(samples)) != len(samples):
        samples = [lfsr.random_bits(lfsr.n) % BN254_PRIME for _ in range(2 * t)]

    xs = FF(samples[:t])
    ys = FF(samples[t:])
    mds = (xs[:, np.newaxis] + ys[np.newaxis, :]) ** -1
    return [[int(v) for v in row] for row in mds]


def generate_parameters(arity: int) -> Dict[str, List]:
    """
    Derive the constants for an arity in the JSON form of params/<arity>.json.

    Returns:
        {"C": List[str], "M": List[List[str]]} with 0x-prefixed hex values
    """
    check_arity(arity)
    t = arity + 1
    rounds_p = ROUNDS_P[arity]

    lfsr = GrainLFSR(t, ROUNDS_F, rounds_p)
    # Constants must be drawn before the matrix; both come from one stream
    round_constants = generate_round_constants(lfsr, (ROUNDS_F + rounds_p) * t)
    mds = generate_mds_matrix(lfsr, t)

    return {
        "C": [hex(c) for c in round_constants],
        "M": [[hex(v) for v in row] for row in mds],
    }
