"""
Poseidon hash for the BN254 scalar field.

A Python implementation of Poseidon with the circomlib parameter set, for
1 to 16 inputs. Digests match circomlib, circomlibjs and poseidon-lite.

This package provides:
- BN254 scalar field arithmetic (via galois)
- The Poseidon permutation and hash
- Per-arity parameter tables and their Grain LFSR derivation
- Cross-implementation test vectors

Usage:
    from poseidon_bn128 import poseidon

    digest = poseidon(2, [99, 100])
    print(hex(int(digest)))
"""

# Field arithmetic (via galois)
from .field import (
    FF,
    BN254_PRIME,
    add,
    sub,
    mul,
    pow5,
    to_field,
    reduce_to_field,
    field_to_hex,
    hex_to_field,
)

# Errors
from .errors import (
    PoseidonError,
    InvalidArity,
    InvalidFieldElement,
    ConfigurationMissing,
)

# Parameters
from .constants import (
    ROUNDS_F,
    ROUNDS_P,
    MIN_ARITY,
    MAX_ARITY,
)
from .config import (
    PoseidonConfig,
    get_config,
    read_constants,
    preload_configs,
)

# Hashing
from .poseidon import (
    permute,
    poseidon,
    poseidon_hex,
)

# Parameter generation
from .grain import (
    GrainLFSR,
    generate_parameters,
)

# Test vectors
from .test_vectors import (
    generate_vectors,
    load_vectors,
    dumps_vectors,
    expected_digest,
    compare_vectors,
)

__version__ = "0.1.0"
__all__ = [
    # Field
    "FF",
    "BN254_PRIME",
    "add",
    "sub",
    "mul",
    "pow5",
    "to_field",
    "reduce_to_field",
    "field_to_hex",
    "hex_to_field",
    # Errors
    "PoseidonError",
    "InvalidArity",
    "InvalidFieldElement",
    "ConfigurationMissing",
    # Parameters
    "ROUNDS_F",
    "ROUNDS_P",
    "MIN_ARITY",
    "MAX_ARITY",
    "PoseidonConfig",
    "get_config",
    "read_constants",
    "preload_configs",
    # Hash
    "permute",
    "poseidon",
    "poseidon_hex",
    # Parameter generation
    "GrainLFSR",
    "generate_parameters",
    # Test vectors
    "generate_vectors",
    "load_vectors",
    "dumps_vectors",
    "expected_digest",
    "compare_vectors",
]
