"""Exceptions raised by the Poseidon hash engine."""


class PoseidonError(Exception):
    """Base class for all Poseidon errors."""


class InvalidArity(PoseidonError, ValueError):
    """Requested arity is unsupported, or the input count does not match it."""


class InvalidFieldElement(PoseidonError, ValueError):
    """Input is not a canonical BN254 scalar field element."""


class ConfigurationMissing(PoseidonError, LookupError):
    """Round constants or MDS matrix are not available for the arity."""
