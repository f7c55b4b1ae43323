"""Tests for Grain LFSR parameter generation."""

import numpy as np
import pytest

from poseidon_bn128.constants import MAX_ARITY, MIN_ARITY, ROUNDS_F, ROUNDS_P, load_params_json
from poseidon_bn128.field import BN254_PRIME, FF
from poseidon_bn128.grain import GrainLFSR, generate_mds_matrix, generate_parameters


class TestGrainLFSR:
    """Bit stream behaviour."""

    def test_deterministic(self) -> None:
        """Same instance description gives the same stream."""
        a = GrainLFSR(3, ROUNDS_F, ROUNDS_P[2])
        b = GrainLFSR(3, ROUNDS_F, ROUNDS_P[2])
        assert [a.next_bit() for _ in range(256)] == [b.next_bit() for _ in range(256)]

    def test_seed_depends_on_width(self) -> None:
        """Different t gives a different stream."""
        a = GrainLFSR(2, ROUNDS_F, 56)
        b = GrainLFSR(3, ROUNDS_F, 56)
        assert a.random_bits(254) != b.random_bits(254)

    def test_bits_are_binary(self) -> None:
        """next_bit() yields only 0 and 1, and both occur."""
        lfsr = GrainLFSR(2, ROUNDS_F, 56)
        bits = [lfsr.next_bit() for _ in range(512)]
        assert set(bits) == {0, 1}

    def test_field_element_in_range(self) -> None:
        """Rejection sampling never returns a value >= p."""
        lfsr = GrainLFSR(2, ROUNDS_F, 56)
        for _ in range(50):
            assert 0 <= lfsr.field_element() < BN254_PRIME

    def test_random_bits_width(self) -> None:
        """random_bits(n) fits in n bits."""
        lfsr = GrainLFSR(2, ROUNDS_F, 56)
        for _ in range(20):
            assert lfsr.random_bits(10) < 1 << 10


class TestMdsMatrix:
    """Cauchy matrix construction."""

    def test_cauchy_property(self) -> None:
        """Each entry inverts to x_i + y_j with consistent x and y."""
        lfsr = GrainLFSR(4, ROUNDS_F, ROUNDS_P[3])
        mds = generate_mds_matrix(lfsr, 4)
        inv = [[int(FF(v) ** -1) for v in row] for row in mds]
        # (x_i + y_j) - (x_0 + y_j) is independent of j
        for i in range(4):
            diffs = {(inv[i][j] - inv[0][j]) % BN254_PRIME for j in range(4)}
            assert len(diffs) == 1

    def test_matrix_is_invertible(self) -> None:
        """A Cauchy matrix over distinct points is non-singular."""
        lfsr = GrainLFSR(3, ROUNDS_F, ROUNDS_P[2])
        mds = FF(generate_mds_matrix(lfsr, 3))
        assert np.linalg.det(mds) != 0


class TestGenerateParameters:
    """Generated tables equal the shipped ones."""

    @pytest.mark.parametrize("arity", range(MIN_ARITY, MAX_ARITY + 1))
    def test_matches_shipped_params(self, arity) -> None:
        """generate_parameters() reproduces params/<arity>.json exactly."""
        assert generate_parameters(arity) == load_params_json(arity)

    def test_output_shape(self) -> None:
        """JSON form has the expected sizes."""
        params = generate_parameters(3)
        t = 4
        assert len(params["C"]) == (ROUNDS_F + ROUNDS_P[3]) * t
        assert len(params["M"]) == t
        assert all(len(row) == t for row in params["M"])
