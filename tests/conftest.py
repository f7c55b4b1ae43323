"""Pytest configuration for poseidon_bn128 tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from poseidon_bn128.test_vectors import load_vectors  # noqa: E402


@pytest.fixture(scope="session")
def reference_vectors():
    """Reference digests: reference_vectors[arity - 1][j] hashes [j] * arity."""
    return load_vectors()
