"""
Poseidon parameters for the BN254 scalar field.

Round counts follow the circomlib instantiation: 8 full rounds for every
width, and the partial round counts recommended by the Poseidon paper
(table 2, table 8), rounded up to the nearest integer that divides by t.

Round constants and MDS matrices are stored as data in params/<arity>.json:

    {
        "C": List[str],        # (ROUNDS_F + ROUNDS_P) * t hex constants
        "M": List[List[str]],  # t x t hex MDS matrix, row-major
    }

These files are exactly what grain.generate_parameters() produces.
"""

import json
from pathlib import Path
from typing import Dict, List

from .errors import ConfigurationMissing, InvalidArity

ROUNDS_F = 8

# Partial rounds indexed by arity (number of inputs), not by width
ROUNDS_P: Dict[int, int] = {
    arity: rounds
    for arity, rounds in enumerate(
        [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68], start=1
    )
}

MIN_ARITY = 1
MAX_ARITY = max(ROUNDS_P)

# S-box exponent
ALPHA = 5

PARAMS_DIR = Path(__file__).parent / "params"


def check_arity(arity: int) -> int:
    """Validate that arity has published parameters and return it."""
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise InvalidArity(f"arity must be an int, got {type(arity).__name__}")
    if not MIN_ARITY <= arity <= MAX_ARITY:
        raise InvalidArity(f"arity must be in [{MIN_ARITY}, {MAX_ARITY}], got {arity}")
    return arity


def params_path(arity: int) -> Path:
    return PARAMS_DIR / f"{check_arity(arity)}.json"


def load_params_json(arity: int) -> Dict[str, List]:
    """
    Read the serialized constants for an arity.

    Returns:
        Dict with "C" (flat list of hex strings) and "M" (list of rows)

    Raises:
        InvalidArity: If arity is outside [MIN_ARITY, MAX_ARITY]
        ConfigurationMissing: If the parameter file is absent or malformed
    """
    path = params_path(arity)
    try:
        with open(path) as f:
            params = json.load(f)
    except FileNotFoundError:
        raise ConfigurationMissing(f"no Poseidon parameters for arity {arity} at {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationMissing(f"malformed Poseidon parameters in {path}: {e}") from e

    if not isinstance(params, dict) or "C" not in params or "M" not in params:
        raise ConfigurationMissing(f"{path} must contain both 'C' and 'M'")
    return params
