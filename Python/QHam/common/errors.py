"""
Exceptions raised by QHam.

Configuration errors derive from :class:`ValueError` so callers that only
catch ``ValueError`` keep working.
"""

class QHamError(Exception):
    """Base class of QHam errors."""

class SymmetryConfigurationError(QHamError, ValueError):
    """A symmetry generator was evaluated before it was configured."""

class HamiltonianConfigurationError(QHamError, ValueError):
    """A model was built from an unknown type or without a known system size."""

class NumericalInvariantError(QHamError, ArithmeticError):
    """A sampled matrix violates an invariant it holds by construction."""

__all__ = [
    "QHamError",
    "SymmetryConfigurationError",
    "HamiltonianConfigurationError",
    "NumericalInvariantError",
]
