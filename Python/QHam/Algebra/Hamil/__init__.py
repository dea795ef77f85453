"""
Helpers of the Hamiltonian classes: type tags and compiled fill kernels.
"""

from QHam.Algebra.Hamil.hamil_types import HamiltonianModels

__all__ = ["HamiltonianModels"]
