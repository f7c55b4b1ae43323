"""
Per-arity Poseidon configuration and the process-wide registry.

A PoseidonConfig is built once per arity from params/<arity>.json and then
shared read-only by every hash call. Constants are held as tuples of canonical
ints so nothing reachable from a config can be mutated.
"""

import threading
from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import ROUNDS_F, ROUNDS_P, check_arity, load_params_json
from .errors import ConfigurationMissing, InvalidFieldElement
from .field import hex_to_field


@dataclass(frozen=True)
class PoseidonConfig:
    """Everything the permutation needs for one arity."""
    arity: int  # Number of absorbed inputs
    t: int  # State width, arity + 1
    n_full_rounds: int  # R_F, split evenly before and after the partial rounds
    n_partial_rounds: int  # R_P
    round_constants: Tuple[int, ...]  # (R_F + R_P) * t, consumed t per round
    mds: Tuple[Tuple[int, ...], ...]  # t x t, row-major

    @property
    def n_rounds(self) -> int:
        return self.n_full_rounds + self.n_partial_rounds

    @classmethod
    def from_serialized(cls, arity: int, params: dict) -> "PoseidonConfig":
        """
        Build a config from the JSON form {"C": [...], "M": [[...]]}.

        Raises:
            ConfigurationMissing: If the tables have the wrong shape or hold
                values that are not field elements
        """
        check_arity(arity)
        t = arity + 1
        n_partial_rounds = ROUNDS_P[arity]

        try:
            c = tuple(int(hex_to_field(x)) for x in params["C"])
            m = tuple(tuple(int(hex_to_field(x)) for x in row) for row in params["M"])
        except InvalidFieldElement as e:
            raise ConfigurationMissing(f"invalid constant for arity {arity}: {e}") from e

        expected = (ROUNDS_F + n_partial_rounds) * t
        if len(c) != expected:
            raise ConfigurationMissing(
                f"arity {arity} needs {expected} round constants, found {len(c)}"
            )
        if len(m) != t or any(len(row) != t for row in m):
            raise ConfigurationMissing(f"arity {arity} needs a {t}x{t} MDS matrix")

        return cls(
            arity=arity,
            t=t,
            n_full_rounds=ROUNDS_F,
            n_partial_rounds=n_partial_rounds,
            round_constants=c,
            mds=m,
        )


def read_constants(arity: int) -> PoseidonConfig:
    """
    Load and parse the constants for an arity, bypassing the registry.

    Rust Reference: poseidon_bn128::read_constants
    """
    return PoseidonConfig.from_serialized(arity, load_params_json(arity))


# Registry of loaded configurations, keyed by arity. Entries are only ever
# added, never replaced.
_configs: Dict[int, PoseidonConfig] = {}
_configs_lock = threading.Lock()


def get_config(arity: int) -> PoseidonConfig:
    """Return the shared configuration for an arity, loading it on first use."""
    check_arity(arity)
    config = _configs.get(arity)
    if config is not None:
        return config
    with _configs_lock:
        if arity not in _configs:
            _configs[arity] = read_constants(arity)
        return _configs[arity]


def preload_configs() -> None:
    """Load every supported arity up front."""
    for arity in ROUNDS_P:
        get_config(arity)
