"""
BN254 scalar field using galois library.

This module provides the prime field that Poseidon operates on: the scalar
field of the alt_bn128 (BN254) curve, the same field circom and snarkjs use.

FF is the field element type. Constructing an FF element checks that the
value is a canonical representative in [0, p), so an FF value is always
reduced. The permutation itself works on plain ints with the helpers below,
which keep every intermediate reduced mod p.
"""

import galois
import numpy as np
from typing import Union

from .errors import InvalidFieldElement

# BN254 scalar field prime (order of the alt_bn128 G1 group)
BN254_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Bit length of p, the `n` of the Poseidon parameter scripts
FIELD_BITS = BN254_PRIME.bit_length()

# Base field GF(p). The multiplicative generator is passed explicitly so galois
# does not have to factor p - 1 at import time.
FF = galois.GF(BN254_PRIME, primitive_element=5, verify=False)

FieldLike = Union[int, np.integer, FF]


# --- Scalar arithmetic on canonical ints ---

def add(a: int, b: int) -> int:
    """Return (a + b) mod p."""
    return (a + b) % BN254_PRIME


def sub(a: int, b: int) -> int:
    """Return (a - b) mod p."""
    return (a - b) % BN254_PRIME


def mul(a: int, b: int) -> int:
    """Return (a * b) mod p."""
    return (a * b) % BN254_PRIME


def pow5(x: int) -> int:
    """
    Compute x^5 in the BN254 scalar field.

    This is the Poseidon S-box. Uses the decomposition x^5 = (x^2)^2 * x.
    """
    x2 = (x * x) % BN254_PRIME
    x4 = (x2 * x2) % BN254_PRIME
    return (x4 * x) % BN254_PRIME


# --- Conversion ---

def _as_int(value) -> int:
    if isinstance(value, FF):
        if value.ndim != 0:
            raise InvalidFieldElement(f"expected a single field element, got an array of shape {value.shape}")
        return int(value)
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidFieldElement(f"field elements must be integers, got {type(value).__name__}")
    return int(value)


def to_field(value: FieldLike) -> FF:
    """
    Convert value to a field element, rejecting anything outside [0, p).

    Args:
        value: An int (or numpy integer, or FF scalar)

    Returns:
        The FF element with the same value

    Raises:
        InvalidFieldElement: If value is not an integer or is not in [0, p)
    """
    v = _as_int(value)
    if not 0 <= v < BN254_PRIME:
        raise InvalidFieldElement(f"value must be in [0, p) for the BN254 scalar field, got {v}")
    return FF(v)


def reduce_to_field(value: FieldLike) -> FF:
    """Convert any integer to a field element by reducing it mod p."""
    return FF(_as_int(value) % BN254_PRIME)


def field_to_hex(x: FieldLike) -> str:
    """Format a field element as lowercase 0x-prefixed hex without zero padding."""
    return hex(int(to_field(x)))


def hex_to_field(s: str) -> FF:
    """Parse a 0x-prefixed hex string into a field element."""
    if not s.startswith("0x"):
        raise InvalidFieldElement(f"expected a 0x-prefixed hex string, got {s!r}")
    try:
        v = int(s[2:], 16)
    except ValueError:
        raise InvalidFieldElement(f"not a hex string: {s!r}") from None
    return to_field(v)
